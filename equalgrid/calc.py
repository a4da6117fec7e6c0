"""
Degree/meter approximations and column sizing for latitude strips.

The approximations are empirical polynomials in latitude rather than a full
ellipsoidal model. Their coefficients fix the strip boundaries of every grid,
so they must not be altered.
"""

__all__ = [
    'circumference', 'column_count', 'column_width',
    'lat_degrees_per_meter', 'lon_degrees_per_meter',
]

import math

from equalgrid._const import EARTH_RADIUS_METERS


def lat_degrees_per_meter(lat: float) -> float:
    """
    Degrees of latitude spanned by one meter of north/south travel at a
    given latitude.

    Args:
        lat:
            The latitude, in degrees

    Returns:
        float
    """
    abs_lat = abs(lat)
    # Meters per arcminute of latitude
    d = (
        -0.00005743 * abs_lat ** 3
        + 0.00777424 * lat * lat
        - 0.02882651 * abs_lat
        + 1842.98959689
    )
    return 1.0 / (d * 60.0)


def lon_degrees_per_meter(lat: float) -> float:
    """
    Degrees of longitude spanned by one meter of east/west travel at a
    given latitude.

    Args:
        lat:
            The latitude, in degrees

    Returns:
        float
    """
    abs_lat = abs(lat)
    # Meters per arcminute of longitude
    d = (
        0.000005164 * lat ** 4
        + 0.0001753 * abs_lat ** 3
        - 0.287705412 * lat * lat
        + 0.101570737 * abs_lat
        + 1854.974604345
    )
    return 1.0 / (d * 60.0)


def circumference(lat: float) -> float:
    """Length (meters) of the parallel at a given latitude, on a spherical earth."""
    return 2.0 * math.pi * EARTH_RADIUS_METERS * math.cos(math.radians(lat))


def _band_distance(lat: float, lon_span: float) -> float:
    return circumference(lat) * (lon_span / 360.0)


def column_count(lat: float, lon_span: float, cell_height: float) -> int:
    """
    The number of cells that fit across a latitude strip.

    Bands no wider than a single cell hold one column. A full 360 degree band
    gets one column more than fits, and a partial band rounds up; either way
    the requested longitude span is covered without a gap.

    Args:
        lat:
            The lower latitude bound of the strip

        lon_span:
            The longitude span of the grid, in degrees

        cell_height:
            The target cell height, in meters

    Returns:
        int, at least 1
    """
    d = _band_distance(lat, lon_span)
    if d <= cell_height:
        return 1

    if lon_span == 360.0:
        return math.floor(d / cell_height) + 1

    return math.ceil(d / cell_height)


def column_width(lat: float, lon_span: float, columns: int) -> float:
    """
    Angular width (degrees) of each column in a strip, evaluated at the
    strip's lower latitude bound.
    """
    return (_band_distance(lat, lon_span) / columns) * lon_degrees_per_meter(lat)
