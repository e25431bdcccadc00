"""Compiled pairwise force laws.

Every force and energy law lives here exactly once, as a scalar numba
function of the separation vector ``r = pos_1 - pos_2`` and the law's
parameters.  :mod:`moldyn.potential` wraps them for single pairs of bodies and
:func:`accumulate_accelerations` runs them over all pairs of a system.

All functions are compiled with ``error_model="numpy"`` so that a zero
separation or a zero mass produces ``inf``/``nan`` instead of raising.
"""

import math

import numba as nb

# Law tags understood by pair_force / pair_energy
GRAVITY = 0
LENNARD_JONES = 1
LAWS = (GRAVITY, LENNARD_JONES)


def check_law(law) -> int:
    """Return ``law`` if it names a compiled force law, else raise ``ValueError``."""
    if law not in LAWS:
        raise ValueError(f"Unknown force law tag {law!r}")
    return law


@nb.njit(error_model="numpy")
def soften_distance(r_mag, softening):
    return r_mag + softening


@nb.njit(error_model="numpy")
def cap_force(fx, fy, cap):
    """Rescale ``(fx, fy)`` to magnitude ``cap`` if it is larger."""
    mag = math.hypot(fx, fy)
    if mag > cap:
        scale = cap / mag
        return fx * scale, fy * scale
    return fx, fy


@nb.njit(error_model="numpy")
def gravity_pair_force(rx, ry, m1, m2, big_g, softening):
    # F = -G m1 m2 r_hat / |r|^2
    r_mag = soften_distance(math.hypot(rx, ry), softening)
    coeff = -big_g * (m1 * m2) / (r_mag * r_mag * r_mag)
    return rx * coeff, ry * coeff


@nb.njit(error_model="numpy")
def gravity_pair_energy(rx, ry, m1, m2, big_g):
    return -big_g * (m1 * m2) / math.hypot(rx, ry)


@nb.njit(error_model="numpy")
def lennard_jones_pair_force(rx, ry, epsilon, sigma, softening):
    # F = r (48 eps / sigma^2) [(sigma/|r|)^14 - 0.5 (sigma/|r|)^8]
    r_mag = soften_distance(math.hypot(rx, ry), softening)
    s = sigma / r_mag
    s2 = s * s
    s4 = s2 * s2
    s8 = s4 * s4
    s14 = s8 * s4 * s2
    coeff = 48.0 * epsilon / (sigma * sigma) * (s14 - 0.5 * s8)
    return rx * coeff, ry * coeff


@nb.njit(error_model="numpy")
def lennard_jones_pair_energy(rx, ry, epsilon, sigma):
    s = sigma / math.hypot(rx, ry)
    s2 = s * s
    s6 = s2 * s2 * s2
    return 4.0 * epsilon * (s6 * s6 - s6)


@nb.njit(error_model="numpy")
def pair_force(law, p0, p1, rx, ry, m1, m2, softening, cap):
    """Force on body 1 from body 2 for the law tagged ``law``.

    ``p0``/``p1`` are the law's parameters: ``(G, unused)`` for gravity and
    ``(epsilon, sigma)`` for Lennard-Jones.
    """
    if law == GRAVITY:
        fx, fy = gravity_pair_force(rx, ry, m1, m2, p0, softening)
    elif law == LENNARD_JONES:
        fx, fy = lennard_jones_pair_force(rx, ry, p0, p1, softening)
    else:
        return math.nan, math.nan
    return cap_force(fx, fy, cap)


@nb.njit(error_model="numpy")
def pair_energy(law, p0, p1, rx, ry, m1, m2):
    if law == GRAVITY:
        return gravity_pair_energy(rx, ry, m1, m2, p0)
    if law == LENNARD_JONES:
        return lennard_jones_pair_energy(rx, ry, p0, p1)
    return math.nan


@nb.njit(error_model="numpy")
def accumulate_accelerations(positions, masses, law, p0, p1, softening, cap, out):
    """Zero ``out`` and fill it with the accelerations of every body.

    Pairs are visited once, ascending ``i`` then ascending ``j > i``; the pair
    force is added to body ``i`` and subtracted from body ``j``.
    """
    n = masses.shape[0]
    for k in range(n):
        out[k, 0] = 0.0
        out[k, 1] = 0.0
    for i in range(n):
        for j in range(i + 1, n):
            rx = positions[i, 0] - positions[j, 0]
            ry = positions[i, 1] - positions[j, 1]
            fx, fy = pair_force(law, p0, p1, rx, ry, masses[i], masses[j], softening, cap)
            out[i, 0] += fx / masses[i]
            out[i, 1] += fy / masses[i]
            out[j, 0] -= fx / masses[j]
            out[j, 1] -= fy / masses[j]
    return out


@nb.njit(error_model="numpy")
def total_pair_energy(positions, masses, law, p0, p1):
    """Sum of the pair energy over all unordered pairs."""
    n = masses.shape[0]
    total = 0.0
    for i in range(n):
        for j in range(i + 1, n):
            rx = positions[i, 0] - positions[j, 0]
            ry = positions[i, 1] - positions[j, 1]
            total += pair_energy(law, p0, p1, rx, ry, masses[i], masses[j])
    return total
