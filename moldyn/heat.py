"""Explicit finite-difference solver for 1-D heat diffusion."""

import numpy as np


def heat_equation_1d(temp1, temp2, temp_init, nx, delta_x, t_duration, delta_t, alpha):
    """Solve ``dT/dt = alpha d2T/dx2`` on a rod with fixed end temperatures.

    Parameters
    ----------
    temp1, temp2 : float
        Temperatures pinned at the first and last spatial point.
    temp_init : float
        Initial temperature of the interior points.
    nx : int
        Number of spatial points, at least 2.
    delta_x : float
        Spacing between points.
    t_duration, delta_t : float
        Simulated duration and time step; ``int(t_duration / delta_t)`` rows
        are produced.
    alpha : float
        Thermal diffusivity.

    Returns
    -------
    numpy.ndarray
        Temperatures with shape ``(nt, nx)``; row ``t`` is the state after
        ``t`` steps.  The scheme is only stable for
        ``alpha * delta_t / delta_x**2 <= 0.5``.
    """
    if nx < 2:
        raise ValueError(f"nx must be at least 2, got {nx!r}")
    if not delta_x > 0 or not delta_t > 0:
        raise ValueError("delta_x and delta_t must be positive")
    nt = int(t_duration / delta_t)

    temp = np.full((nt, nx), float(temp_init))
    temp[:, 0] = temp1
    temp[:, -1] = temp2

    r = alpha * delta_t / (delta_x * delta_x)
    for t in range(nt - 1):
        row = temp[t]
        temp[t + 1, 1:-1] = row[1:-1] + r * (row[2:] - 2.0 * row[1:-1] + row[:-2])
    return temp
