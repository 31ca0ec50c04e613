"""
Constants declarations for geodesy
"""

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_F = 1 / 298.257223563  # Flattening
WGS84_B = 6356752.314245  # Minor axis (meters)

# Mean Earth Radius (default for spherical collaborators)
EARTH_RADIUS_METERS = 6_371_000.0

# Vincenty iteration controls
VINCENTY_TOLERANCE = 1e-12  # radians
VINCENTY_INVERSE_MAX_ITER = 1000
VINCENTY_DIRECT_MAX_ITER = 100

# UTM
UTM_SCALE_FACTOR = 0.9996  # k0, scale on the central meridian
FALSE_EASTING = 500e3
FALSE_NORTHING = 10000e3
UTM_MIN_LATITUDE = -80.
UTM_MAX_LATITUDE = 84.
UTM_NEWTON_TOLERANCE = 1e-12
UTM_NEWTON_MAX_ITER = 20

# MGRS latitude bands, 8 degrees tall from 80S; X is repeated for 80-84N
MGRS_LATITUDE_BANDS = 'CDEFGHJKLMNPQRSTUVWXX'

# Output rounding (decimal places)
DISTANCE_PRECISION = 3  # mm
BEARING_PRECISION = 9  # ~0.00001 arcsecond
GRID_PRECISION = 6  # nm
LATLON_PRECISION = 11  # nm
CONVERGENCE_PRECISION = 9
SCALE_PRECISION = 12
