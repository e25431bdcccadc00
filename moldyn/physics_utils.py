"""Diagnostics over bodies and parallel state arrays."""

import numpy as np

from . import jit
from .vector import Vector2D


def bodies_to_arrays(bodies):
    """Return ``(positions, velocities, accelerations, masses)`` for ``bodies``.

    Vectors become ``(n, 2)`` float arrays and masses an ``(n,)`` array, in the
    order of ``bodies``.
    """
    n = len(bodies)
    positions = np.zeros((n, 2), dtype=np.float64)
    velocities = np.zeros((n, 2), dtype=np.float64)
    accelerations = np.zeros((n, 2), dtype=np.float64)
    masses = np.zeros(n, dtype=np.float64)
    for i, b in enumerate(bodies):
        positions[i] = b.pos.as_array()
        velocities[i] = b.vel.as_array()
        accelerations[i] = b.acc.as_array()
        masses[i] = b.mass
    return positions, velocities, accelerations, masses


def kinetic_energy(velocities, masses) -> float:
    velocities = np.asarray(velocities, dtype=np.float64)
    masses = np.asarray(masses, dtype=np.float64)
    return float(0.5 * np.sum(masses * np.einsum("ij,ij->i", velocities, velocities)))


def potential_energy(positions, masses, potential) -> float:
    """Total pair energy of a system under ``potential``."""
    p0, p1 = potential.params
    return float(
        jit.total_pair_energy(
            np.ascontiguousarray(positions, dtype=np.float64),
            np.ascontiguousarray(masses, dtype=np.float64),
            jit.check_law(potential.law),
            p0,
            p1,
        )
    )


def system_energy(bodies, potential):
    """Return total kinetic, potential and mechanical energy of ``bodies``."""
    if not bodies:
        return 0.0, 0.0, 0.0
    positions, velocities, _, masses = bodies_to_arrays(bodies)
    kinetic = kinetic_energy(velocities, masses)
    pot = potential_energy(positions, masses, potential)
    return kinetic, pot, kinetic + pot


def total_momentum(bodies) -> Vector2D:
    p = Vector2D.zero()
    for b in bodies:
        p = p + b.vel * b.mass
    return p


def calculate_center_of_mass(positions, masses) -> np.ndarray:
    """Mass-weighted mean position.

    Returns ``nan`` components when the total mass is zero, including for an
    empty system.
    """
    positions = np.asarray(positions, dtype=np.float64).reshape(-1, 2)
    masses = np.asarray(masses, dtype=np.float64)
    weighted = np.sum(positions * masses[:, None], axis=0)
    with np.errstate(divide="ignore", invalid="ignore"):
        return weighted / np.sum(masses)
