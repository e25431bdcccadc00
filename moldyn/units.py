"""Dimension aliases and config-level unit scaling.

Every quantity handled by the simulation is a plain SI ``float``.  The
``NewType`` aliases below only document which physical dimension a value
carries so that annotations read ``Vector2D[Length]`` rather than
``Vector2D[float]``; they add no runtime checks.

:class:`LengthUnit` and :class:`MassUnit` convert between SI values and the
unit a configuration chooses for display or for generating initial
conditions.
"""

from enum import Enum
from typing import NewType

from . import constants as C

Length = NewType("Length", float)
Mass = NewType("Mass", float)
Time = NewType("Time", float)
Velocity = NewType("Velocity", float)
Acceleration = NewType("Acceleration", float)
Force = NewType("Force", float)
Energy = NewType("Energy", float)
Ratio = NewType("Ratio", float)
# L^3 M^-1 T^-2
GravitationalParameter = NewType("GravitationalParameter", float)


class LengthUnit(Enum):
    METER = ("m", 1.0)
    NANOMETER = ("nm", C.NANOMETER)
    ANGSTROM = ("Å", C.ANGSTROM)
    PICOMETER = ("pm", C.PICOMETER)

    def __init__(self, symbol, scale):
        self.symbol = symbol
        self.scale = scale

    def new(self, value: float) -> Length:
        """Return ``value`` expressed in this unit as metres."""
        return Length(float(value) * self.scale)

    def get(self, length: Length) -> float:
        """Return a length in metres expressed in this unit."""
        return float(length) / self.scale


class MassUnit(Enum):
    KILOGRAM = ("kg", 1.0)
    DALTON = ("Da", C.DALTON)

    def __init__(self, symbol, scale):
        self.symbol = symbol
        self.scale = scale

    def new(self, value: float) -> Mass:
        return Mass(float(value) * self.scale)

    def get(self, mass: Mass) -> float:
        return float(mass) / self.scale
