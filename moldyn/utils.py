"""Human-readable formatting for run statistics."""

from . import constants as C

# (threshold, scale, symbol, format) checked largest first
_MASS_UNITS = (
    (0.1 * C.SOLAR_MASS, C.SOLAR_MASS, "M☉", ".2f"),
    (0.1 * C.EARTH_MASS, C.EARTH_MASS, "M⊕", ".2f"),
    (1e-20, 1.0, "kg", ".2e"),
)

_DISTANCE_UNITS = (
    (0.1 * C.AU, C.AU, "AU", ".2f"),
    (1e6, 1e6, "Mm", ".2f"),
    (1e3, 1e3, "km", ".2f"),
    (1e-3, 1.0, "m", ".1f"),
    (C.NANOMETER, C.NANOMETER, "nm", ".2f"),
)

_CLOCK_UNITS = (
    (C.SECONDS_PER_YEAR, "years"),
    (C.SECONDS_PER_DAY, "days"),
    (3600, "hrs"),
    (60, "min"),
    (1, "sec"),
    (1e-3, "ms"),
    (1e-6, "µs"),
    (1e-9, "ns"),
    (1e-12, "ps"),
)


def _scaled(value, magnitude, table, fallback):
    for threshold, scale, symbol, fmt in table:
        if magnitude >= threshold:
            return f"{value / scale:{fmt}} {symbol}"
    scale, symbol, fmt = fallback
    return f"{value / scale:{fmt}} {symbol}"


def mass_to_display(mass_kg: float) -> str:
    """Solar and Earth masses for astronomical bodies, daltons for atoms."""
    if mass_kg == 0:
        return "0 kg"
    return _scaled(mass_kg, mass_kg, _MASS_UNITS, (C.DALTON, "Da", ".2f"))


def distance_to_display(dist_meters: float) -> str:
    if dist_meters == 0:
        return "0 m"
    return _scaled(dist_meters, abs(dist_meters), _DISTANCE_UNITS, (C.ANGSTROM, "Å", ".2f"))


def time_to_display(seconds: float) -> str:
    """Format a simulated duration, from femtoseconds up to years."""
    if seconds < 0:
        return "N/A"
    if seconds == 0:
        return "0 sec"
    for scale, symbol in _CLOCK_UNITS:
        if seconds >= scale:
            return f"{seconds / scale:.1f} {symbol}"
    return f"{seconds / C.FEMTOSECOND:.1f} fs"


def format_stats(elapsed_time: float, steps_taken: int, body_count: int):
    """Return ``(label, value)`` pairs for a statistics overlay."""
    return [
        ("Elapsed", time_to_display(elapsed_time)),
        ("Steps", str(steps_taken)),
        ("Bodies", str(body_count)),
    ]
