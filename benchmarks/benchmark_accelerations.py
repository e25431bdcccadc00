import time
import numpy as np

from moldyn import jit
from moldyn.constants import ARGON_EPSILON, ARGON_SIGMA, ARGON_MASS


def accelerations_python(positions, masses, epsilon=ARGON_EPSILON, sigma=ARGON_SIGMA):
    n = len(masses)
    acc = np.zeros((n, 2), dtype=np.float64)
    for i in range(n):
        r_vec = positions[i] - positions
        dist = np.sqrt(np.einsum("ij,ij->i", r_vec, r_vec))
        dist[i] = np.inf
        s = sigma / dist
        coeff = 48.0 * epsilon / sigma**2 * (s**14 - 0.5 * s**8)
        acc[i] = np.sum(r_vec * coeff[:, None], axis=0) / masses[i]
    return acc


if __name__ == "__main__":
    rng = np.random.default_rng(0)
    N = 1500
    positions = rng.uniform(0.0, 40 * ARGON_SIGMA, size=(N, 2))
    masses = np.full(N, ARGON_MASS)
    out = np.zeros((N, 2))

    # warm up JIT
    jit.accumulate_accelerations(positions, masses, jit.LENNARD_JONES, ARGON_EPSILON, ARGON_SIGMA, 0.0, np.inf, out)

    t0 = time.time()
    baseline = accelerations_python(positions, masses)
    t1 = time.time()
    jit.accumulate_accelerations(positions, masses, jit.LENNARD_JONES, ARGON_EPSILON, ARGON_SIGMA, 0.0, np.inf, out)
    t2 = time.time()

    assert np.allclose(baseline, out, rtol=1e-6)
    print(f"Python loop: {t1 - t0:.3f}s")
    print(f"Compiled    : {t2 - t1:.3f}s")
    if t2 - t1 > 0:
        print(f"Speedup     : {(t1 - t0) / (t2 - t1):.1f}x")
