import numpy as np

from moldyn import jit
from moldyn.config import SimulationConfig
from moldyn.potential import Gravity, LennardJones


def _python_accelerations(potential, positions, masses, config):
    zeros = np.zeros_like(positions)
    acc = np.zeros_like(positions)
    n = len(masses)
    for i in range(n):
        for j in range(i + 1, n):
            f = potential.force_from_arrays(i, j, positions, zeros, zeros, masses, config)
            acc[i] += f / masses[i]
            acc[j] -= f / masses[j]
    return acc


def test_jit_matches_python_multiple_bodies():
    rng = np.random.default_rng(0)
    positions = rng.uniform(-5.0, 5.0, size=(12, 2))
    masses = rng.uniform(1.0, 3.0, size=12)
    config = SimulationConfig(time_step=1.0, force_softening_epsilon=0.05, force_cap=50.0)

    for potential in (Gravity(big_g=1.0), LennardJones(epsilon=1.0, sigma=1.0)):
        expected = _python_accelerations(potential, positions, masses, config)
        out = np.full_like(positions, 123.0)
        p0, p1 = potential.params
        jit.accumulate_accelerations(
            positions, masses, potential.law, p0, p1, config.softening, config.cap, out
        )
        assert np.allclose(out, expected, rtol=1e-12, atol=0.0)


def test_accumulate_resets_output_for_single_body():
    positions = np.array([[1.0, 2.0]])
    masses = np.array([4.0])
    out = np.ones((1, 2))
    jit.accumulate_accelerations(positions, masses, jit.GRAVITY, 1.0, 0.0, 0.0, np.inf, out)
    assert np.array_equal(out, np.zeros((1, 2)))


def test_accumulate_empty_system():
    out = np.zeros((0, 2))
    jit.accumulate_accelerations(
        np.zeros((0, 2)), np.zeros(0), jit.LENNARD_JONES, 1.0, 1.0, 0.0, np.inf, out
    )
    assert out.shape == (0, 2)


def test_total_pair_energy_matches_pairwise_sum():
    positions = np.array([[0.0, 0.0], [3.0, 0.0], [0.0, 4.0]])
    masses = np.array([1.0, 2.0, 3.0])
    total = jit.total_pair_energy(positions, masses, jit.GRAVITY, 1.0, 0.0)
    expected = -(1.0 * 2.0 / 3.0 + 1.0 * 3.0 / 4.0 + 2.0 * 3.0 / 5.0)
    assert np.isclose(total, expected, rtol=1e-12)
