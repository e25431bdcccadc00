import numpy as np

from .config import SimulationConfig


class Camera:
    """Map world coordinates to pixel coordinates.

    World lengths are converted to ``config.length_unit``, scaled by
    ``config.pixels_per_length`` and placed relative to the screen centre,
    shifted by :attr:`pan_offset` world metres.
    """

    def __init__(self, config: SimulationConfig, screen_size, pan_offset=None):
        self.config = config
        self.screen_size = np.asarray(screen_size, dtype=float).reshape(2)
        self.pan_offset = (
            np.asarray(pan_offset, dtype=float).reshape(2)
            if pan_offset is not None
            else np.zeros(2)
        )

    @property
    def screen_center(self):
        return self.screen_size / 2.0

    def world_to_screen(self, pos):
        """Convert a world position (metres) to screen pixels."""
        pos = np.asarray(tuple(pos), dtype=float)[:2] - self.pan_offset
        scaled = pos / self.config.length_unit.scale * self.config.pixels_per_length
        return self.screen_center + scaled

    def follow(self, target):
        """Pan so that world point ``target`` sits at the screen centre.

        Non-finite targets (e.g. the centroid of a massless system) are
        ignored.
        """
        target = np.asarray(tuple(target), dtype=float)[:2]
        if not np.all(np.isfinite(target)):
            return
        self.pan_offset = target
