"""
Constants declarations for gpxstructures
"""

# WGS84 Ellipsoid Constants
WGS84_A = 6_378_137.0  # Semi-major axis (meters)
WGS84_B = 6_356_752.314245  # Semi-minor axis (meters)

# IERS Conventions (1989) Ellipsoid Constants
IERS_1989_A = 6_378_136.0
IERS_1989_B = 6_356_751.302

# IERS Conventions (2003) Ellipsoid Constants
IERS_2003_A = 6_378_136.6
IERS_2003_B = 6_356_751.9

# Vincenty inverse iteration controls
DISTANCE_ITERATION_MAX = 20
DISTANCE_ITERATION_EPSILON = 1e-12
