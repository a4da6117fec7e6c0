"""
Module for bucketing positions into equal-area grid cells
"""

__all__ = ['EqualAreaHasher']

from collections import defaultdict
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from equalgrid.grid import Grid
from equalgrid.utils.mixins import LoggingMixin


class EqualAreaHasher(LoggingMixin):
    """
    Groups positions by the equal-area grid cell they fall in.

    Args:
        grid:
            The grid whose cell ids are used as hash keys
    """

    def __init__(self, grid: Grid):
        super().__init__()
        self.grid = grid

    def hash_coordinate(self, lon: float, lat: float) -> Optional[int]:
        """
        Returns the cell id of a single position, or None if it lies outside
        the grid.
        """
        return self.grid.cell_id(lon, lat)

    def hash_coordinates(
        self,
        coordinates: Sequence[Tuple[float, float]],
        agg_fn: Callable[[List[Tuple[float, float]]], Any] = len,
    ) -> Dict[int, Any]:
        """
        Hashes a collection of positions and aggregates the positions that
        share a cell.

        Args:
            coordinates:
                (longitude, latitude) pairs

            agg_fn: (Default len)
                A function that accepts the list of positions in a cell. If
                not specified, positions are counted.

        Returns:
            A dictionary of cell ids mapped to the result of the aggregation
            function. Positions outside the grid are left out.
        """
        hash_dict: Dict[int, List[Tuple[float, float]]] = defaultdict(list)
        skipped = 0
        for lon, lat in coordinates:
            cell_id = self.grid.cell_id(lon, lat)
            if cell_id is None:
                skipped += 1
                continue

            hash_dict[cell_id].append((lon, lat))

        if skipped:
            self.logger.debug('%d positions fell outside %r and were skipped', skipped, self.grid)

        return {cell_id: agg_fn(coords) for cell_id, coords in hash_dict.items()}
