"""Object-oriented orchestration of a collection of point masses."""

import logging
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from .body import PointMass
from .config import SimulationConfig, is_positive_int
from .integrators import StepType
from .units import Length, Mass
from .vector import Vector2D

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RectangularBounds:
    """Axis-aligned rectangle ``[x1, x2] x [y1, y2]`` in metres."""

    x1: Length
    x2: Length
    y1: Length
    y2: Length


def check_substeps(substeps, config: SimulationConfig) -> int:
    if substeps is None:
        return config.time_steps_per_frame
    if not is_positive_int(substeps):
        raise ValueError(f"substeps must be a positive integer, got {substeps!r}")
    return int(substeps)


class Cluster:
    """A collection of bodies stepped together.

    Forces are evaluated through :meth:`Potential.force` on the body objects
    themselves; see :class:`~moldyn.handler.SimulationHandler` for the
    array-based equivalent.
    """

    def __init__(self, bodies: List[PointMass], config: SimulationConfig):
        self.bodies = list(bodies)
        self.config = config
        self.elapsed_time = 0.0
        self.steps_taken = 0
        logger.debug("Cluster created with %d bodies", len(self.bodies))

    @classmethod
    def random(
        cls,
        config: SimulationConfig,
        bounds: RectangularBounds,
        count: int,
        mass: Mass,
        rng: Optional[np.random.Generator] = None,
    ) -> "Cluster":
        """Place ``count`` bodies of equal ``mass`` uniformly inside ``bounds``.

        All bodies start at rest.  Pass a seeded ``numpy.random.Generator``
        for reproducible layouts.
        """
        if rng is None:
            rng = np.random.default_rng()
        xs = rng.uniform(bounds.x1, bounds.x2, size=count)
        ys = rng.uniform(bounds.y1, bounds.y2, size=count)
        bodies = [
            PointMass.at_rest((x, y), mass, config.time_step) for x, y in zip(xs, ys)
        ]
        return cls(bodies, config)

    def __len__(self):
        return len(self.bodies)

    def total_mass(self) -> Mass:
        return Mass(sum((b.mass for b in self.bodies), 0.0))

    def center_of_mass(self) -> Vector2D:
        """Mass-weighted centroid; non-finite when the total mass is zero."""
        weighted = Vector2D.zero()
        total = 0.0
        for b in self.bodies:
            weighted = weighted + b.pos * b.mass
            total += b.mass
        return weighted / total

    def compute_forces(self, potential) -> None:
        """Reset accelerations and accumulate every pair interaction once."""
        for b in self.bodies:
            b.reset_forces()
        n = len(self.bodies)
        for i in range(n):
            a = self.bodies[i]
            for j in range(i + 1, n):
                b = self.bodies[j]
                force = potential.force(a, b, self.config)
                a.accelerate(force)
                b.accelerate(-force)

    def step(self, potential, step_type=None) -> None:
        """Run a single sub-step: forces, then one integration per body."""
        step_type = StepType.parse(step_type)
        self.compute_forces(potential)
        for b in self.bodies:
            b.step(step_type, self.config.time_step)
        self.elapsed_time += self.config.time_step
        self.steps_taken += 1

    def advance(self, potential, step_type=None, substeps: Optional[int] = None) -> None:
        """Advance one frame of ``substeps`` sub-steps.

        ``substeps`` defaults to ``config.time_steps_per_frame``.
        """
        step_type = StepType.parse(step_type)
        substeps = check_substeps(substeps, self.config)
        for _ in range(substeps):
            self.step(potential, step_type)
