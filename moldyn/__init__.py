"""Point-mass simulation kernel: pair potentials and explicit integrators."""

from importlib.metadata import PackageNotFoundError, version

from .vector import Vector2D
from .config import SimulationConfig
from .units import LengthUnit, MassUnit
from .potential import Potential, Gravity, LennardJones
from .integrators import StepType
from .body import IntegrationState, PointMass
from .cluster import Cluster, RectangularBounds
from .handler import SimulationHandler
from .physics_utils import system_energy, total_momentum
from .heat import heat_equation_1d
from .constants import G_REAL, ARGON_EPSILON, ARGON_SIGMA, ARGON_MASS

try:
    __version__ = version("moldyn")
except PackageNotFoundError:
    # Fallback when package metadata is unavailable (e.g. running from source)
    __version__ = "0.0.0"

__all__ = [
    "Vector2D",
    "SimulationConfig",
    "LengthUnit",
    "MassUnit",
    "Potential",
    "Gravity",
    "LennardJones",
    "StepType",
    "IntegrationState",
    "PointMass",
    "Cluster",
    "RectangularBounds",
    "SimulationHandler",
    "system_energy",
    "total_momentum",
    "heat_equation_1d",
    "G_REAL",
    "ARGON_EPSILON",
    "ARGON_SIGMA",
    "ARGON_MASS",
    "__version__",
]
