"""Pairwise interaction potentials.

A :class:`Potential` turns two bodies (or two rows of parallel state arrays)
into a potential energy and the force exerted on the first by the second.
The laws themselves are compiled functions in :mod:`moldyn.jit`; the classes
here only carry parameters and adapt inputs.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from . import constants as C
from . import jit
from .config import SimulationConfig, resolve_config
from .units import Energy, GravitationalParameter, Length
from .vector import Vector2D


class Potential(ABC):
    """Interface shared by all pair potentials.

    Subclasses set :attr:`law` to one of the tags in :mod:`moldyn.jit` and
    expose their two numeric parameters through :attr:`params`.
    """

    law: int

    @property
    @abstractmethod
    def params(self) -> Tuple[float, float]:
        """The ``(p0, p1)`` parameters passed to the compiled law."""

    def force_from_arrays(
        self,
        idx1: int,
        idx2: int,
        positions: np.ndarray,
        velocities: np.ndarray,
        accelerations: np.ndarray,
        masses: np.ndarray,
        config: Optional[SimulationConfig] = None,
    ) -> np.ndarray:
        """Force on body ``idx1`` exerted by body ``idx2``.

        ``velocities`` and ``accelerations`` are part of the signature so that
        velocity-dependent laws can be added; neither built-in law reads them.
        Softening and capping from ``config`` are applied.
        """
        softening, cap = resolve_config(config)
        p0, p1 = self.params
        fx, fy = jit.pair_force(
            jit.check_law(self.law),
            p0,
            p1,
            float(positions[idx1][0] - positions[idx2][0]),
            float(positions[idx1][1] - positions[idx2][1]),
            float(masses[idx1]),
            float(masses[idx2]),
            softening,
            cap,
        )
        return np.array([fx, fy], dtype=np.float64)

    def energy_from_arrays(
        self,
        idx1: int,
        idx2: int,
        positions: np.ndarray,
        velocities: np.ndarray,
        accelerations: np.ndarray,
        masses: np.ndarray,
    ) -> Energy:
        """Potential energy of the pair ``(idx1, idx2)`` (unsoftened)."""
        p0, p1 = self.params
        return jit.pair_energy(
            jit.check_law(self.law),
            p0,
            p1,
            float(positions[idx1][0] - positions[idx2][0]),
            float(positions[idx1][1] - positions[idx2][1]),
            float(masses[idx1]),
            float(masses[idx2]),
        )

    def force(self, object1, object2, config: Optional[SimulationConfig] = None) -> Vector2D:
        """Force exerted on ``object1`` by ``object2``."""
        positions, velocities, accelerations, masses = _pair_arrays(object1, object2)
        return Vector2D.from_array(
            self.force_from_arrays(0, 1, positions, velocities, accelerations, masses, config)
        )

    def energy(self, object1, object2) -> Energy:
        """Potential energy between ``object1`` and ``object2``."""
        return self.energy_from_arrays(0, 1, *_pair_arrays(object1, object2))


def _pair_arrays(object1, object2):
    positions = np.array([object1.pos.as_array(), object2.pos.as_array()])
    velocities = np.array([object1.vel.as_array(), object2.vel.as_array()])
    accelerations = np.array([object1.acc.as_array(), object2.acc.as_array()])
    masses = np.array([object1.mass, object2.mass], dtype=np.float64)
    return positions, velocities, accelerations, masses


@dataclass(frozen=True)
class Gravity(Potential):
    """Newtonian gravity, ``U = -G m1 m2 / r``."""

    big_g: GravitationalParameter = GravitationalParameter(C.G_REAL)

    law = jit.GRAVITY

    @property
    def params(self):
        return float(self.big_g), 0.0


@dataclass(frozen=True)
class LennardJones(Potential):
    """Lennard-Jones 12-6 potential, ``U = 4 eps [(sigma/r)^12 - (sigma/r)^6]``.

    Defaults are the argon parameters (eps = 0.0104 eV, sigma = 3.40 Å).
    """

    epsilon: Energy = Energy(C.ARGON_EPSILON)
    sigma: Length = Length(C.ARGON_SIGMA)

    law = jit.LENNARD_JONES

    @classmethod
    def xenon(cls) -> "LennardJones":
        return cls(epsilon=Energy(C.XENON_EPSILON), sigma=Length(C.XENON_SIGMA))

    @property
    def params(self):
        return float(self.epsilon), float(self.sigma)

    @property
    def equilibrium_distance(self) -> Length:
        """Separation at which the pair force vanishes, ``2**(1/6) sigma``."""
        return Length(self.sigma * 2.0 ** (1.0 / 6.0))
