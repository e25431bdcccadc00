import math

import numpy as np
import pytest

from moldyn.config import SimulationConfig, resolve_config
from moldyn.units import LengthUnit, MassUnit
from moldyn import constants as C


def test_defaults():
    cfg = SimulationConfig(time_step=1.0)
    assert cfg.time_steps_per_frame == 1
    assert cfg.softening == 0.0
    assert math.isinf(cfg.cap)
    assert cfg.length_unit is LengthUnit.METER
    assert cfg.mass_unit is MassUnit.KILOGRAM


@pytest.mark.parametrize(
    "kwargs",
    [
        {"time_step": 0.0},
        {"time_step": -1.0},
        {"time_step": 1.0, "time_steps_per_frame": 0},
        {"time_step": 1.0, "time_steps_per_frame": 2.5},
        {"time_step": 1.0, "time_steps_per_frame": None},
        {"time_step": 1.0, "time_steps_per_frame": float("inf")},
        {"time_step": 1.0, "time_steps_per_frame": True},
        {"time_step": None},
        {"time_step": 1.0, "force_softening_epsilon": -1e-3},
        {"time_step": 1.0, "force_cap": 0.0},
        {"time_step": 1.0, "pixels_per_length": 0.0},
    ],
)
def test_invalid_values_rejected(kwargs):
    with pytest.raises(ValueError):
        SimulationConfig(**kwargs)


def test_with_time_step_copies():
    cfg = SimulationConfig(time_step=1.0, force_cap=5.0)
    other = cfg.with_time_step(2.0)
    assert other.time_step == 2.0
    assert other.force_cap == 5.0
    assert cfg.time_step == 1.0


def test_resolve_config():
    assert resolve_config(None) == (0.0, float("inf"))
    cfg = SimulationConfig(time_step=1.0, force_softening_epsilon=0.5, force_cap=3.0)
    assert resolve_config(cfg) == (0.5, 3.0)


def test_length_and_mass_units():
    assert LengthUnit.ANGSTROM.new(3.4) == pytest.approx(C.ARGON_SIGMA)
    assert LengthUnit.ANGSTROM.get(C.ARGON_SIGMA) == pytest.approx(3.4)
    assert LengthUnit.NANOMETER.get(1e-9) == pytest.approx(1.0)
    assert MassUnit.DALTON.get(C.ARGON_MASS) == pytest.approx(39.948)
    assert MassUnit.KILOGRAM.new(2.0) == 2.0


def test_numpy_integer_steps_per_frame_accepted():
    cfg = SimulationConfig(time_step=np.float64(0.5), time_steps_per_frame=np.int64(3))
    assert cfg.time_steps_per_frame == 3
