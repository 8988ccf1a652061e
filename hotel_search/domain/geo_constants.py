"""Geographic, ranking and paging constants shared across the service."""

import math

# Coordinate bounds
MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0

# Earth measurements
EARTH_RADIUS_KM = 6371.0  # mean radius
KM_PER_DEGREE_LAT = 111.0
EARTH_CIRCUMFERENCE_KM = 40_075.0

# Search defaults
DEFAULT_SEARCH_RADIUS_KM = EARTH_CIRCUMFERENCE_KM / 2  # longer than any antipodal distance
POLAR_COSINE_THRESHOLD = 1e-4
POLAR_LONGITUDE_RANGE = 180.0

# Ranking weights (must sum to 1)
PRICE_WEIGHT = 0.5
DISTANCE_WEIGHT = 0.5

# Search result paging
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

# Two coordinates closer than this (per component, degrees) are equal
COORDINATE_EQUALITY_TOLERANCE = 1e-7

LATITUDE_ERROR_MESSAGE = "Latitude must be between -90 and 90 degrees."
LONGITUDE_ERROR_MESSAGE = "Longitude must be between -180 and 180 degrees."


def is_valid_latitude(latitude: float) -> bool:
    return MIN_LATITUDE <= latitude <= MAX_LATITUDE


def is_valid_longitude(longitude: float) -> bool:
    return MIN_LONGITUDE <= longitude <= MAX_LONGITUDE


def is_finite(value: float) -> bool:
    return not (math.isnan(value) or math.isinf(value))
