"""Mathematical, astronomical and physical constants used throughout the package."""

import math

# Mathematical constants
PI = 3.14159265358979324
PI2 = 2 * PI
RAD = PI / 180
"""Radians per degree."""
DEG = 180 / PI
"""Degrees per radian."""
ARCS = 3600 * 180 / PI
"""Arcseconds per radian."""

# General
MJD_J2000 = 51544.5
"""Modified Julian Date of the J2000 epoch."""
T_B1950 = -0.500002108
"""Epoch B1950 in Julian centuries from J2000."""
C_LIGHT = 299792458.000000000
"""Speed of light [m/s]."""
AU = 149597870700.000000
"""Astronomical unit [m]."""

# Physical parameters
R_EARTH = 6378.1363e3
"""Equatorial radius of the Earth [m]."""
F_EARTH = 1.0 / 298.257223563
"""Flattening of the Earth."""
R_SUN = 696000e3
"""Radius of the Sun [m]."""
R_MOON = 1738e3
"""Radius of the Moon [m]."""
OMEGA_EARTH = 15.04106717866910 / 3600 * RAD
"""Earth rotation rate [rad/s]."""

# Gravitational coefficients [m^3/s^2]
GM_EARTH = 398600.435436e9
GM_SUN = 132712440041.939400e9
GM_MOON = GM_EARTH / 81.30056907419062
GM_MERCURY = 22031.780000e9
GM_VENUS = 324858.592000e9
GM_MARS = 42828.375214e9
GM_JUPITER = 126712764.800000e9
GM_SATURN = 37940585.200000e9
GM_URANUS = 5794548.600000e9
GM_NEPTUNE = 6836527.100580e9
GM_PLUTO = 977.0000000000009e9

# Solar radiation pressure at 1 AU [N/m^2]
P_SOL = 1367 / C_LIGHT

assert math.isclose(PI, math.pi)