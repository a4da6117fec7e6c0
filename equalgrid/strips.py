"""
Latitude strip records and the strip layout of a grid
"""

from __future__ import annotations

__all__ = ['Strip', 'build_strips', 'count_strips', 'iter_strip_steps']

from typing import Iterator, Tuple

from equalgrid._const import POLE_CAP_WIDTH, POLE_LATITUDE
from equalgrid.calc import column_count, column_width, lat_degrees_per_meter
from equalgrid.exceptions import GridConfigurationError


class Strip:
    """
    One latitude band of a grid, divided into equal-width columns.

    Args:
        latmin:
            The lower latitude bound of the strip

        height:
            The angular height of the strip, in degrees

        columns:
            The number of cells across the strip

        width:
            The angular width of each cell, in degrees. Pole caps use
            POLE_CAP_WIDTH.
    """

    def __init__(self, latmin: float, height: float, columns: int, width: float):
        self._latmin = latmin
        self._height = height
        self._columns = columns
        self._width = width

    def __eq__(self, other) -> bool:
        if not isinstance(other, Strip):
            return False

        return (
            self._latmin == other._latmin and
            self._height == other._height and
            self._columns == other._columns and
            self._width == other._width
        )

    def __hash__(self) -> int:
        return hash((self._latmin, self._height, self._columns, self._width))

    def __repr__(self):
        if self.is_pole_cap:
            return f'<Strip pole cap [{self.latmin}, {self.latmax}]>'
        return (
            f'<Strip [{self.latmin}, {self.latmax}) '
            f'{self.columns} columns of {self.width} deg>'
        )

    @classmethod
    def pole_cap(cls, latmin: float, latmax: float) -> Strip:
        """Creates a single-cell strip covering a polar region"""
        return cls(latmin, latmax - latmin, 1, POLE_CAP_WIDTH)

    @property
    def latmin(self) -> float:
        return self._latmin

    @property
    def height(self) -> float:
        return self._height

    @property
    def latmax(self) -> float:
        """The upper latitude bound of the strip"""
        return self._latmin + self._height

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def width(self) -> float:
        return self._width

    @property
    def is_pole_cap(self) -> bool:
        return self._width == POLE_CAP_WIDTH


def iter_strip_steps(
    latmin: float,
    latmax: float,
    cell_height: float
) -> Iterator[Tuple[float, float]]:
    """
    Walks latitude northward from the lower grid bound, yielding the lower
    bound and angular height of each strip outside the pole caps.

    Every call restarts the walk, so the sizing and building passes always
    see the same sequence of strips.

    Args:
        latmin:
            The minimum latitude of the grid

        latmax:
            The maximum latitude of the grid

        cell_height:
            The target cell height, in meters

    Yields:
        (lower bound, angular height) tuples, south to north
    """
    lat = max(latmin, -POLE_LATITUDE)
    stop = min(latmax, POLE_LATITUDE)
    while lat < stop:
        height = cell_height * lat_degrees_per_meter(lat)
        yield lat, height

        next_lat = lat + height
        if next_lat <= lat:
            raise GridConfigurationError(
                f'Cell height of {cell_height} meters is too small to advance '
                f'latitude beyond {lat}'
            )
        lat = next_lat


def count_strips(latmin: float, latmax: float, cell_height: float) -> int:
    """
    The number of strips, pole caps included, that build_strips() will
    produce for the same arguments.
    """
    caps = int(latmin < -POLE_LATITUDE) + int(latmax > POLE_LATITUDE)
    return caps + sum(1 for _ in iter_strip_steps(latmin, latmax, cell_height))


def build_strips(
    lonmin: float,
    latmin: float,
    lonmax: float,
    latmax: float,
    cell_height: float,
) -> Tuple[Strip, ...]:
    """
    Lays out the strips of a grid, south to north.

    A pole cap is added on either end when the grid reaches beyond
    POLE_LATITUDE on that hemisphere.

    Args:
        lonmin:
            The minimum longitude of the grid

        latmin:
            The minimum latitude of the grid

        lonmax:
            The maximum longitude of the grid

        latmax:
            The maximum latitude of the grid

        cell_height:
            The target cell height, in meters

    Returns:
        A tuple of Strips
    """
    lon_span = lonmax - lonmin
    strips = []

    if latmin < -POLE_LATITUDE:
        strips.append(Strip.pole_cap(latmin, min(latmax, -POLE_LATITUDE)))

    for lat, height in iter_strip_steps(latmin, latmax, cell_height):
        columns = column_count(lat, lon_span, cell_height)
        strips.append(
            Strip(lat, height, columns, column_width(lat, lon_span, columns))
        )

    if latmax > POLE_LATITUDE:
        strips.append(Strip.pole_cap(max(latmin, POLE_LATITUDE), latmax))

    return tuple(strips)
