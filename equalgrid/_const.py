"""
Constants declarations for equalgrid
"""

# Mean Earth radius used for parallel circumference (meters)
EARTH_RADIUS_METERS = 6_371_228.0

# Latitudes beyond +/- this value collapse into a single pole cap cell
POLE_LATITUDE = 89.8

# Column width reported for pole cap strips
POLE_CAP_WIDTH = -1.0
