"""Run diagnostics built on :mod:`moldyn.physics_utils`."""

from collections import deque

from .physics_utils import system_energy


class EnergyMonitor:
    """Track the relative drift of the total mechanical energy.

    Drift is recorded in percent of ``|E0|``, the energy captured by
    :meth:`set_initial_energy`.  Only the latest ``max_points`` samples are
    kept.
    """

    def __init__(self, max_points=500):
        self.history = deque(maxlen=max_points)
        self.initial_energy = None

    def set_initial_energy(self, bodies, potential):
        self.initial_energy = system_energy(bodies, potential)[2]
        self.history.clear()

    def drift(self, energy):
        """Percent deviation of ``energy`` from the reference, or ``None``."""
        reference = self.initial_energy
        if reference is None or abs(reference) < 1e-300:
            return None
        return (energy - reference) / abs(reference) * 100

    def update(self, bodies, potential):
        drift = self.drift(system_energy(bodies, potential)[2])
        if drift is not None:
            self.history.append(drift)

    @property
    def latest(self):
        return self.history[-1] if self.history else None

    @property
    def max_abs_drift(self):
        return max(map(abs, self.history), default=0.0)
