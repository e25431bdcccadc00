"""Array-based orchestration for larger systems.

:class:`SimulationHandler` mirrors every body field in a parallel numpy
array, runs the all-pairs force pass in compiled code and applies the
integrators to all bodies at once.  Body objects are only touched when
synchronising.
"""

import logging
from typing import List, Optional

import numpy as np

from . import jit
from .body import IntegrationState, PointMass
from .cluster import check_substeps
from .config import SimulationConfig
from .integrators import StepType, naive_update, velocity_verlet_update, verlet_update
from .physics_utils import bodies_to_arrays, calculate_center_of_mass
from .vector import Vector2D

logger = logging.getLogger(__name__)


class SimulationHandler:
    """Drive a list of :class:`PointMass` objects through parallel arrays."""

    def __init__(self, bodies: List[PointMass], config: SimulationConfig):
        self.bodies = list(bodies)
        self.config = config
        self.elapsed_time = 0.0
        self.steps_taken = 0
        self.sync_from_bodies()
        logger.debug("SimulationHandler created with %d bodies", len(self.bodies))

    def sync_from_bodies(self) -> None:
        """Copy state and integration history from the body objects."""
        (
            self.positions,
            self.velocities,
            self.accelerations,
            self.masses,
        ) = bodies_to_arrays(self.bodies)
        n = len(self.bodies)
        self.last_positions = np.zeros((n, 2), dtype=np.float64)
        self.last_velocities = np.zeros((n, 2), dtype=np.float64)
        self.history_initialized = np.zeros(n, dtype=bool)
        for i, b in enumerate(self.bodies):
            self.last_positions[i] = b.history.last_position.as_array()
            self.last_velocities[i] = b.history.last_velocity.as_array()
            self.history_initialized[i] = b.history.initialized

    def sync_to_bodies(self) -> None:
        """Write array state back to the body objects."""
        for i, b in enumerate(self.bodies):
            b.pos = Vector2D.from_array(self.positions[i])
            b.vel = Vector2D.from_array(self.velocities[i])
            b.acc = Vector2D.from_array(self.accelerations[i])
            b.mass = float(self.masses[i])
            b.history = IntegrationState(
                Vector2D.from_array(self.last_positions[i]),
                Vector2D.from_array(self.last_velocities[i]),
                bool(self.history_initialized[i]),
            )

    def _check_shapes(self) -> None:
        n = self.masses.shape[0]
        for name in ("positions", "velocities", "accelerations", "last_positions", "last_velocities"):
            if getattr(self, name).shape != (n, 2):
                raise ValueError(
                    f"{name} has shape {getattr(self, name).shape}, expected {(n, 2)}"
                )

    def compute_forces(self, potential) -> None:
        """Refill :attr:`accelerations` from all pair interactions."""
        p0, p1 = potential.params
        jit.accumulate_accelerations(
            self.positions,
            self.masses,
            jit.check_law(potential.law),
            p0,
            p1,
            self.config.softening,
            self.config.cap,
            self.accelerations,
        )

    def integrate(self, step_type) -> None:
        """Apply one step of ``step_type`` to every body."""
        dt = self.config.time_step
        if step_type is StepType.NAIVE:
            self.positions, self.velocities = naive_update(
                self.positions, self.velocities, self.accelerations, dt
            )
            return
        if step_type is StepType.VERLET:
            self.positions, self.velocities, self.last_positions = verlet_update(
                self.positions, self.last_positions, self.accelerations, dt
            )
        else:
            (
                self.positions,
                self.velocities,
                self.last_positions,
                self.last_velocities,
            ) = velocity_verlet_update(self.positions, self.velocities, self.accelerations, dt)
        self.history_initialized[:] = True

    def advance(
        self,
        potential,
        step_type=None,
        substeps: Optional[int] = None,
        sync: bool = True,
    ) -> None:
        """Advance one frame of ``substeps`` sub-steps.

        Each sub-step resets and recomputes all accelerations before any body
        moves.  With ``sync`` the body objects are updated once at the end of
        the frame.
        """
        step_type = StepType.parse(step_type)
        substeps = check_substeps(substeps, self.config)
        self._check_shapes()
        for _ in range(substeps):
            self.compute_forces(potential)
            self.integrate(step_type)
        self.elapsed_time += substeps * self.config.time_step
        self.steps_taken += substeps
        if sync:
            self.sync_to_bodies()

    def center_of_mass(self) -> Vector2D:
        return Vector2D.from_array(calculate_center_of_mass(self.positions, self.masses))
