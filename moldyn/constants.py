"""Physical constants and reference parameter sets (SI units)."""

# Newtonian gravity, m^3 kg^-1 s^-2
G_REAL = 6.67430e-11

# Unit conversions
ELECTRONVOLT = 1.602176634e-19  # J
ANGSTROM = 1e-10  # m
NANOMETER = 1e-9  # m
PICOMETER = 1e-12  # m
DALTON = 1.66053906660e-27  # kg
FEMTOSECOND = 1e-15  # s

# Argon, Lennard-Jones reference species
ARGON_EPSILON = 0.0104 * ELECTRONVOLT
ARGON_SIGMA = 3.4 * ANGSTROM
ARGON_MASS = 39.948 * DALTON

# Xenon, alternative Lennard-Jones parameters
XENON_EPSILON = 0.0184 * ELECTRONVOLT
XENON_SIGMA = 4.10 * ANGSTROM

# Earth-Moon system
EARTH_MASS = 5.972e24  # kg
MOON_MASS = 7.342e22  # kg
EARTH_MOON_DISTANCE = 3.844e8  # m
MOON_ORBITAL_VELOCITY = 1022.0  # m/s

SOLAR_MASS = 1.989e30  # kg
AU = 1.496e11  # m

SECONDS_PER_YEAR = 31536000
SECONDS_PER_DAY = 86400
