"""
Neighbourhood helpers over flat costmap indices.

All functions clip to the costmap bounds, so cells on an edge simply
have fewer neighbours.
"""

import logging
from collections import deque
from typing import List, Optional

import numpy as np

from .costmap import Costmap2D

logger = logging.getLogger(__name__)


def nhood4(idx: int, costmap: Costmap2D) -> List[int]:
    """4-connected neighbours of idx: left, right, up, down."""
    size_x = costmap.size_in_cells_x
    size_y = costmap.size_in_cells_y

    out: List[int] = []
    if idx < 0 or idx > size_x * size_y - 1:
        logger.warning("Evaluating nhood for offmap point %d", idx)
        return out

    if idx % size_x > 0:
        out.append(idx - 1)
    if idx % size_x < size_x - 1:
        out.append(idx + 1)
    if idx >= size_x:
        out.append(idx - size_x)
    if idx < size_x * (size_y - 1):
        out.append(idx + size_x)
    return out


def nhood8(idx: int, costmap: Costmap2D) -> List[int]:
    """8-connected neighbours of idx: the 4-neighbourhood followed by the diagonals."""
    out = nhood4(idx, costmap)

    size_x = costmap.size_in_cells_x
    size_y = costmap.size_in_cells_y
    if idx < 0 or idx > size_x * size_y - 1:
        return out

    if idx % size_x > 0 and idx >= size_x:
        out.append(idx - 1 - size_x)
    if idx % size_x > 0 and idx < size_x * (size_y - 1):
        out.append(idx - 1 + size_x)
    if idx % size_x < size_x - 1 and idx >= size_x:
        out.append(idx + 1 - size_x)
    if idx % size_x < size_x - 1 and idx < size_x * (size_y - 1):
        out.append(idx + 1 + size_x)
    return out


def nearest_cell(
    start: int,
    value: int,
    costmap: Costmap2D,
    max_cells: Optional[int] = None,
) -> Optional[int]:
    """
    Breadth-first search outwards from start for the closest cell holding value.

    Args:
        start: flat index to search from.
        value: cost value to look for.
        costmap: costmap to search.
        max_cells: stop after expanding this many cells (None = whole map).

    Returns:
        Flat index of the nearest matching cell, or None if there is none
        within the search limit.
    """
    size = costmap.size_in_cells_x * costmap.size_in_cells_y
    if start < 0 or start >= size:
        return None

    cells = costmap.char_map
    visited = np.zeros(size, dtype=bool)
    bfs = deque([start])
    visited[start] = True
    expanded = 0

    while bfs:
        idx = bfs.popleft()
        if cells[idx] == value:
            return idx

        expanded += 1
        if max_cells is not None and expanded >= max_cells:
            break

        for nbr in nhood8(idx, costmap):
            if not visited[nbr]:
                visited[nbr] = True
                bfs.append(nbr)

    return None
