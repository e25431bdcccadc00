"""Explicit time-integration schemes.

The update rules are written once and only use ``+``, ``-`` and scalar
``*``/``/``, so the same functions advance a single body's
:class:`~moldyn.vector.Vector2D` state and whole ``(n, 2)`` numpy arrays.
Each rule returns new values; nothing is modified in place.
"""

from enum import Enum


class StepType(Enum):
    """Available integrators."""

    #: Explicit Euler, R(k+1) = R(k) + dt V(k) and V(k+1) = V(k) + dt A(k)
    NAIVE = "Naive"
    #: Störmer-Verlet with a central-difference velocity
    VERLET = "Verlet"
    #: Velocity Verlet using the pre-step acceleration for the velocity update
    VELOCITY_VERLET = "VelocityVerlet"

    @classmethod
    def parse(cls, value) -> "StepType":
        """Return the member for ``value``; ``None`` selects :attr:`NAIVE`."""
        if value is None:
            return cls.NAIVE
        if isinstance(value, cls):
            return value
        key = str(value).replace("_", "").replace("-", "").lower()
        for member in cls:
            if key in (member.name.replace("_", "").lower(), member.value.lower()):
                return member
        raise ValueError(f"Unknown integrator {value!r}")

    @property
    def uses_history(self) -> bool:
        return self is not StepType.NAIVE


def bootstrap_last_position(position, velocity, acceleration, dt):
    """Approximate the position one step before the initial state.

    R(-1) ~ R(0) - dt (V(0) + dt A(0) / 2), the second-order Taylor estimate
    Störmer-Verlet needs for its first step.
    """
    return position - dt * (velocity + (dt * acceleration) / 2.0)


def naive_update(position, velocity, acceleration, dt):
    """Return ``(position, velocity)`` after one explicit Euler step."""
    return position + dt * velocity, velocity + dt * acceleration


def verlet_update(position, last_position, acceleration, dt):
    """Return ``(position, velocity, last_position)`` after one Verlet step."""
    new_position = 2.0 * position - last_position + dt * (dt * acceleration)
    new_velocity = (new_position - last_position) / (2.0 * dt)
    return new_position, new_velocity, position


def velocity_verlet_update(position, velocity, acceleration, dt):
    """Return ``(position, velocity, last_position, last_velocity)``.

    The velocity kick reuses the acceleration of the current state for both
    half steps; the textbook scheme would average it with the acceleration
    at the new position.
    """
    half_dt = dt / 2.0
    new_position = position + dt * velocity + half_dt * (dt * acceleration)
    new_velocity = velocity + half_dt * (2.0 * acceleration)
    return new_position, new_velocity, position, velocity
