"""
Equal-area grid over a geographic bounding box
"""

from __future__ import annotations

__all__ = ['Grid']

from bisect import bisect_left, bisect_right
from functools import cached_property
from itertools import accumulate
import math
from numbers import Integral
from typing import Any, Optional, Sequence, Tuple, Union

import numpy as np
from pydantic import validate_call

from equalgrid._const import POLE_LATITUDE
from equalgrid.exceptions import GridConfigurationError
from equalgrid.strips import Strip, build_strips
from equalgrid.utils.logging import LOGGER, warn_once


class Grid:
    """
    Partitions a bounding box into cells of roughly equal physical area.

    The box is cut into latitude strips whose angular height corresponds to
    cell_height meters. Each strip is cut into as many equal-width columns as
    fit across it at its lower latitude bound, so strips hold fewer columns
    toward the poles. Latitudes beyond +/- 89.8 degrees form a single pole
    cap cell.

    Cells are identified by dense integer ids, assigned south to north and
    west to east within a strip. Grids are immutable once constructed.

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
            The target height (and approximate width) of a cell, in meters

    Raises:
        GridConfigurationError:
            If the bounds are empty or inverted, or the cell height is not
            positive
    """

    @validate_call
    def __init__(
        self,
        lonmin: float,
        latmin: float,
        lonmax: float,
        latmax: float,
        cell_height: float,
    ):
        if not all(map(math.isfinite, (lonmin, latmin, lonmax, latmax, cell_height))):
            raise GridConfigurationError('Grid bounds and cell height must be finite numbers')

        if cell_height <= 0:
            raise GridConfigurationError(f'Cell height must be positive, not {cell_height}')

        if latmin >= latmax:
            raise GridConfigurationError(
                f'Minimum latitude {latmin} must be less than maximum latitude {latmax}'
            )

        if lonmin >= lonmax:
            raise GridConfigurationError(
                f'Minimum longitude {lonmin} must be less than maximum longitude {lonmax}'
            )

        if latmin < -90 or latmax > 90:
            warn_once(
                'Grid latitude bounds extend beyond the poles; '
                'cells past +/- 90 degrees are folded into the pole caps.'
            )

        if lonmax - lonmin > 360:
            warn_once(
                'Grid longitude span of %s degrees exceeds 360; cells will overlap.',
                lonmax - lonmin
            )

        self._lonmin, self._latmin = lonmin, latmin
        self._lonmax, self._latmax = lonmax, latmax
        self._cell_height = cell_height
        self._strips = build_strips(lonmin, latmin, lonmax, latmax, cell_height)

        # First cell id of each strip, followed by the total cell count
        self._offsets = tuple(accumulate((s.columns for s in self._strips), initial=0))

        # Non-decreasing, so the containing strip can be found by bisection
        self._upper_bounds = tuple(accumulate((s.latmax for s in self._strips), max))

        LOGGER.debug(
            'Built %d latitude strips holding %d cells for %r',
            len(self._strips), self.total_cell_count, self
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return False

        return self._key == other._key

    def __hash__(self) -> int:
        return hash(self._key)

    def __len__(self) -> int:
        return self.total_cell_count

    def __repr__(self):
        return (
            f'<Grid [{self._lonmin}, {self._latmin}, {self._lonmax}, {self._latmax}] '
            f'at {self._cell_height}m>'
        )

    @property
    def _key(self) -> Tuple[float, ...]:
        return self._lonmin, self._latmin, self._lonmax, self._latmax, self._cell_height

    @property
    def lonmin(self) -> float:
        return self._lonmin

    @property
    def latmin(self) -> float:
        return self._latmin

    @property
    def lonmax(self) -> float:
        return self._lonmax

    @property
    def latmax(self) -> float:
        return self._latmax

    @property
    def cell_height(self) -> float:
        """The target cell height, in meters"""
        return self._cell_height

    @property
    def strips(self) -> Tuple[Strip, ...]:
        """The latitude strips of the grid, south to north"""
        return self._strips

    @property
    def total_cell_count(self) -> int:
        return self._offsets[-1]

    @cached_property
    def _strip_arrays(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Upper bounds, first cell ids and column counts of the strips, as arrays"""
        return (
            np.array(self._upper_bounds, dtype=float),
            np.array(self._offsets[:-1], dtype=np.int64),
            np.array([s.columns for s in self._strips], dtype=np.int64),
        )

    def _contains(self, lon: float, lat: float) -> bool:
        # Written so that NaN compares as outside
        return (
            self._lonmin <= lon <= self._lonmax and
            self._latmin <= lat <= self._latmax
        )

    def _column(self, lon: float, columns: int) -> int:
        column = math.floor((lon - self._lonmin) / (self._lonmax - self._lonmin) * columns)
        # lonmax itself belongs to the last column
        return min(column, columns - 1)

    def _column_span(self, strip: Strip) -> float:
        """Angular width of the columns of a strip, as divided by cell_id()"""
        return (self._lonmax - self._lonmin) / strip.columns

    def _column_west(self, row: int, index: int) -> float:
        """Western edge of the column holding a cell"""
        return self._lonmin + (index - self._offsets[row]) * self._column_span(self._strips[row])

    def _as_index(self, cell_id: Any) -> Optional[int]:
        """Returns cell_id as an int if it identifies a cell in this grid"""
        if isinstance(cell_id, Integral):
            index = int(cell_id)
        elif isinstance(cell_id, float) and cell_id.is_integer():
            index = int(cell_id)
        else:
            return None

        if not 0 <= index < self.total_cell_count:
            return None

        return index

    def cell_id(self, lon: float, lat: float) -> Optional[int]:
        """
        Finds the id of the cell containing a position.

        Args:
            lon:
                The longitude of the position

            lat:
                The latitude of the position

        Returns:
            The cell id, or None if the position lies outside the grid
        """
        if not self._contains(lon, lat):
            return None

        if lat < -POLE_LATITUDE:
            return 0

        if lat > POLE_LATITUDE:
            return self.total_cell_count - 1

        row = bisect_left(self._upper_bounds, lat)
        if row == len(self._strips):
            return None

        return self._offsets[row] + self._column(lon, self._strips[row].columns)

    def cell_ids(
        self,
        lons: Union[Sequence[float], np.ndarray],
        lats: Union[Sequence[float], np.ndarray]
    ) -> np.ma.MaskedArray:
        """
        Finds the cell ids of many positions at once.

        Args:
            lons:
                Longitudes of the positions

            lats:
                Latitudes of the positions; must broadcast against lons

        Returns:
            A masked integer array of cell ids, where positions outside the
            grid are masked
        """
        lons, lats = np.broadcast_arrays(
            np.asarray(lons, dtype=float),
            np.asarray(lats, dtype=float)
        )
        inside = (
            (lons >= self._lonmin) & (lons <= self._lonmax) &
            (lats >= self._latmin) & (lats <= self._latmax)
        )
        lons = np.where(inside, lons, self._lonmin)
        lats = np.where(inside, lats, self._latmin)

        upper_bounds, offsets, columns = self._strip_arrays
        rows = np.searchsorted(upper_bounds, lats, side='left')
        inside &= rows < len(self._strips)
        rows = np.minimum(rows, len(self._strips) - 1)

        row_columns = columns[rows]
        fraction = (lons - self._lonmin) / (self._lonmax - self._lonmin)
        column = np.minimum(np.floor(fraction * row_columns).astype(np.int64), row_columns - 1)

        ids = offsets[rows] + column
        ids = np.where(lats < -POLE_LATITUDE, 0, ids)
        ids = np.where(lats > POLE_LATITUDE, self.total_cell_count - 1, ids)

        return np.ma.masked_array(ids, mask=~inside)

    def strip_of(self, cell_id: int) -> Optional[Strip]:
        """The strip holding a cell, or None if the id is out of range"""
        index = self._as_index(cell_id)
        if index is None:
            return None

        return self._strips[bisect_right(self._offsets, index) - 1]

    def cell_position(self, cell_id: int) -> Optional[Tuple[float, float]]:
        """
        Approximates the position of a cell.

        The position is the southern edge of the cell's strip at the cell's
        western edge, with columns dividing the longitude span of the grid
        evenly as cell_id() divides it. This is adequate for placing cells on
        a map overlay but is not the cell centroid. The first and last cells
        report the grid's minimum and maximum latitude, both at the minimum
        longitude.

        Args:
            cell_id:
                The cell id

        Returns:
            (latitude, longitude), or None if the id is out of range
        """
        index = self._as_index(cell_id)
        if index is None:
            return None

        if index == 0:
            return self._latmin, self._lonmin

        if index == self.total_cell_count - 1:
            return self._latmax, self._lonmin

        row = bisect_right(self._offsets, index) - 1
        return self._strips[row].latmin, self._column_west(row, index)

    def cell_bounds(self, cell_id: int) -> Optional[Tuple[float, float, float, float]]:
        """
        The angular bounding box of a cell. Pole caps span the full longitude
        range of the grid.

        Args:
            cell_id:
                The cell id

        Returns:
            (lonmin, latmin, lonmax, latmax), or None if the id is out of range
        """
        index = self._as_index(cell_id)
        if index is None:
            return None

        row = bisect_right(self._offsets, index) - 1
        strip = self._strips[row]
        if strip.is_pole_cap:
            return self._lonmin, strip.latmin, self._lonmax, strip.latmax

        west = self._column_west(row, index)
        return west, strip.latmin, west + self._column_span(strip), strip.latmax
