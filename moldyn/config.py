"""Simulation configuration."""

import logging
import numbers
from dataclasses import dataclass, replace
from typing import Optional

from .units import Force, Length, LengthUnit, MassUnit, Time

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationConfig:
    """Run-wide settings consumed read-only by the simulation core.

    Parameters
    ----------
    time_step : float
        Fixed integration step in seconds. Constant for the whole run.
    time_steps_per_frame : int, optional
        Number of sub-steps taken per call to ``advance`` before control
        returns to the caller.
    force_softening_epsilon : float, optional
        Length added to every separation inside the force laws. ``None``
        disables softening.
    force_cap : float, optional
        Upper bound on the magnitude of any pairwise force. ``None`` disables
        capping.
    length_unit, mass_unit : LengthUnit, MassUnit
        Units used when presenting or generating values.
    pixels_per_length : float
        Screen pixels per ``length_unit``.
    display_stats : bool
        Whether a front end should show run statistics.
    """

    time_step: Time
    time_steps_per_frame: int = 1
    force_softening_epsilon: Optional[Length] = None
    force_cap: Optional[Force] = None
    length_unit: LengthUnit = LengthUnit.METER
    mass_unit: MassUnit = MassUnit.KILOGRAM
    pixels_per_length: float = 1.0
    display_stats: bool = False

    def __post_init__(self):
        if not isinstance(self.time_step, numbers.Real) or not self.time_step > 0:
            raise ValueError(f"time_step must be positive, got {self.time_step!r}")
        if not is_positive_int(self.time_steps_per_frame):
            raise ValueError(
                f"time_steps_per_frame must be a positive integer, got {self.time_steps_per_frame!r}"
            )
        if self.force_softening_epsilon is not None and self.force_softening_epsilon < 0:
            raise ValueError(
                f"force_softening_epsilon must be non-negative, got {self.force_softening_epsilon!r}"
            )
        if self.force_cap is not None and not self.force_cap > 0:
            raise ValueError(f"force_cap must be positive, got {self.force_cap!r}")
        if not self.pixels_per_length > 0:
            raise ValueError(
                f"pixels_per_length must be positive, got {self.pixels_per_length!r}"
            )
        logger.debug("Created %r", self)

    @property
    def softening(self) -> float:
        """Softening length as a plain float, ``0.0`` when disabled."""
        if self.force_softening_epsilon is None:
            return 0.0
        return float(self.force_softening_epsilon)

    @property
    def cap(self) -> float:
        """Force cap as a plain float, ``inf`` when disabled."""
        if self.force_cap is None:
            return float("inf")
        return float(self.force_cap)

    def with_time_step(self, time_step: Time) -> "SimulationConfig":
        """Return a copy using ``time_step``.

        Bodies bootstrapped with the old step must be re-bootstrapped with
        :meth:`moldyn.body.PointMass.bootstrap_history`.
        """
        return replace(self, time_step=time_step)


def resolve_config(config: Optional[SimulationConfig]):
    """Return ``(softening, cap)`` for an optional configuration."""
    if config is None:
        return 0.0, float("inf")
    return config.softening, config.cap


def is_positive_int(value) -> bool:
    """True for integers >= 1, including numpy integers but not ``bool``."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool) and int(value) >= 1
