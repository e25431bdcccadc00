import numpy as np
import pytest

from moldyn.heat import heat_equation_1d


def test_shape_and_pinned_boundaries():
    temp = heat_equation_1d(100.0, 0.0, 0.0, nx=10, delta_x=1.0, t_duration=10.0, delta_t=0.1, alpha=1.0)
    assert temp.shape == (100, 10)
    assert np.all(temp[:, 0] == 100.0)
    assert np.all(temp[:, -1] == 0.0)
    assert np.all(temp[0, 1:-1] == 0.0)


def test_rod_warms_monotonically_without_overshoot():
    temp = heat_equation_1d(100.0, 0.0, 0.0, nx=10, delta_x=1.0, t_duration=10.0, delta_t=0.1, alpha=1.0)
    assert np.all(np.diff(temp[:, 1:-1], axis=0) >= 0.0)
    assert temp.min() >= 0.0
    assert temp.max() <= 100.0
    assert temp[-1, 1] > temp[-1, 2] > 0.0


def test_relaxes_to_linear_profile():
    temp = heat_equation_1d(100.0, 0.0, 20.0, nx=5, delta_x=1.0, t_duration=200.0, delta_t=0.25, alpha=1.0)
    assert temp[-1] == pytest.approx([100.0, 75.0, 50.0, 25.0, 0.0], abs=1e-6)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"nx": 1},
        {"delta_x": 0.0},
        {"delta_t": -0.1},
    ],
)
def test_invalid_grid_rejected(kwargs):
    args = dict(nx=10, delta_x=1.0, t_duration=1.0, delta_t=0.1, alpha=1.0)
    args.update(kwargs)
    with pytest.raises(ValueError):
        heat_equation_1d(1.0, 0.0, 0.0, **args)
