"""Point masses and their integration history."""

from dataclasses import dataclass

from .integrators import (
    StepType,
    bootstrap_last_position,
    naive_update,
    velocity_verlet_update,
    verlet_update,
)
from .units import Acceleration, Length, Mass, Time, Velocity
from .vector import Vector2D


@dataclass
class IntegrationState:
    """History kept for the Verlet-family integrators.

    ``initialized`` is False until the first Verlet or velocity-Verlet step;
    before that ``last_position`` holds the bootstrap estimate.
    """

    last_position: Vector2D
    last_velocity: Vector2D
    initialized: bool = False


class PointMass:
    """A particle without extent carrying its own kinematic state."""

    def __init__(
        self,
        pos: Vector2D,
        vel: Vector2D,
        acc: Vector2D,
        mass: Mass,
        time_step: Time,
    ):
        """Create a point mass.

        Parameters
        ----------
        pos, vel, acc : Vector2D
            Initial position (m), velocity (m/s) and acceleration (m/s^2).
        mass : float
            Mass in kilograms.
        time_step : float
            The run's fixed time step, used once to bootstrap the Verlet
            history.
        """
        self.pos: Vector2D[Length] = pos
        self.vel: Vector2D[Velocity] = vel
        self.acc: Vector2D[Acceleration] = acc
        self.mass = float(mass)
        self.history = IntegrationState(Vector2D.zero(), Vector2D.zero())
        self.bootstrap_history(time_step)

    @classmethod
    def at_rest(cls, pos, mass, time_step):
        """Point mass at ``pos`` with zero velocity and acceleration."""
        return cls(Vector2D(*pos), Vector2D.zero(), Vector2D.zero(), mass, time_step)

    def bootstrap_history(self, time_step: Time) -> None:
        """Synthesize ``last_position`` from the current state.

        Must be called again whenever the run's time step changes.
        """
        self.history = IntegrationState(
            last_position=bootstrap_last_position(self.pos, self.vel, self.acc, time_step),
            last_velocity=Vector2D.zero(),
        )

    @property
    def last_pos(self) -> Vector2D:
        return self.history.last_position

    @property
    def last_vel(self) -> Vector2D:
        return self.history.last_velocity

    def reset_forces(self) -> None:
        self.acc = Vector2D.zero()

    def accelerate(self, force: Vector2D) -> None:
        """Add the acceleration produced by ``force``."""
        self.acc = self.acc + force / self.mass

    def apply_force(self, potential, other: "PointMass", config=None) -> None:
        """Accumulate the force ``other`` exerts on this body."""
        self.accelerate(potential.force(self, other, config))

    def step(self, step_type, time_step: Time) -> None:
        """Advance by one ``time_step`` with the chosen integrator.

        A ``step_type`` of ``None`` selects explicit Euler.
        """
        step_type = StepType.parse(step_type)
        if step_type is StepType.NAIVE:
            self.pos, self.vel = naive_update(self.pos, self.vel, self.acc, time_step)
        elif step_type is StepType.VERLET:
            self.pos, self.vel, last_pos = verlet_update(
                self.pos, self.history.last_position, self.acc, time_step
            )
            self.history = IntegrationState(last_pos, self.history.last_velocity, True)
        else:
            self.pos, self.vel, last_pos, last_vel = velocity_verlet_update(
                self.pos, self.vel, self.acc, time_step
            )
            self.history = IntegrationState(last_pos, last_vel, True)

    def __repr__(self):
        return (
            f"PointMass(pos={self.pos!r}, vel={self.vel!r}, "
            f"acc={self.acc!r}, mass={self.mass})"
        )
