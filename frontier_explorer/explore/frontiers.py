import logging
from collections import deque
from typing import List, Optional, Tuple

import numpy as np

from frontier_explorer.costmap import (
    FREE_SPACE,
    NO_INFORMATION,
    Costmap2D,
    nearest_cell,
    nhood4,
    nhood8,
)
from .scoring import FrontierScorer
from .types import Frontier

logger = logging.getLogger(__name__)


class FrontierSearch:
    """
    Wavefront frontier search over a Costmap2D.

    A map BFS (4-connected) walks outwards from the agent over free or
    descending-cost cells. Whenever it touches an unknown cell bordering free
    space, a frontier BFS (8-connected) grows the whole region from there.
    Frontiers are then scored and returned cheapest first.
    """

    def __init__(
        self,
        costmap: Costmap2D,
        potential_scale: float,
        gain_scale: float,
        min_frontier_size: float,
        scorer: Optional[FrontierScorer] = None,
        nearest_free_limit: Optional[int] = None,
    ):
        """
        Args:
            costmap: grid to search, locked for the duration of each search
            potential_scale: weight on distance to the frontier (favour close)
            gain_scale: weight on frontier size (favour large)
            min_frontier_size: smallest frontier kept, in meters (size * resolution)
            scorer: cost model; when given, its own scales are used and the two above are ignored
            nearest_free_limit: cells expanded when looking for a free start cell (None = whole map)
        """
        self.costmap = costmap
        self.min_frontier_size = min_frontier_size
        self.scorer = scorer or FrontierScorer(potential_scale, gain_scale)
        self.nearest_free_limit = nearest_free_limit

        self._map: Optional[np.ndarray] = None

    @classmethod
    def from_config(cls, costmap: Costmap2D, config, rng: Optional[np.random.Generator] = None) -> "FrontierSearch":
        # config: an ExploreConfig from frontier_explorer.configs
        scorer = FrontierScorer(config.potential_scale, config.gain_scale, hazard=config.hazard, rng=rng)
        return cls(
            costmap,
            config.potential_scale,
            config.gain_scale,
            config.min_frontier_size,
            scorer=scorer,
            nearest_free_limit=config.nearest_free_limit,
        )

    def search_from(self, position: Tuple[float, float]) -> List[Frontier]:
        """
        Finds all frontiers reachable from position (world x, y).

        Returns:
            Frontiers sorted by ascending cost, or [] if position is off the map.
        """
        frontier_list: List[Frontier] = []

        # Sanity check that the agent is inside the costmap before searching
        cell = self.costmap.world_to_map(position[0], position[1])
        if cell is None:
            logger.error("Robot out of costmap bounds, cannot search for frontiers")
            return frontier_list

        # Keep the map consistent for the whole search
        with self.costmap.get_mutex():
            try:
                self._map = self.costmap.char_map
                size_x = self.costmap.size_in_cells_x
                size_y = self.costmap.size_in_cells_y

                frontier_flag = np.zeros(size_x * size_y, dtype=bool)
                visited_flag = np.zeros(size_x * size_y, dtype=bool)

                bfs = deque()

                # Start from the closest clear cell
                pos = self.costmap.get_index(*cell)
                clear = nearest_cell(pos, FREE_SPACE, self.costmap, max_cells=self.nearest_free_limit)
                if clear is not None:
                    bfs.append(clear)
                else:
                    bfs.append(pos)
                    logger.warning("Could not find nearby clear cell to start search")
                visited_flag[bfs[0]] = True

                while bfs:
                    idx = bfs.popleft()

                    for nbr in nhood4(idx, self.costmap):
                        # Descend into cheaper cells too, in case we started on a non-free cell
                        if self._map[nbr] <= self._map[idx] and not visited_flag[nbr]:
                            visited_flag[nbr] = True
                            bfs.append(nbr)
                        elif self._is_new_frontier_cell(nbr, frontier_flag):
                            frontier_flag[nbr] = True
                            new_frontier = self._build_new_frontier(nbr, pos, frontier_flag)
                            if new_frontier.size * self.costmap.resolution >= self.min_frontier_size:
                                frontier_list.append(new_frontier)

                self.scorer.score_all(frontier_list, position, self.costmap.resolution)
            finally:
                self._map = None

        # list.sort is stable, so equal costs keep discovery order
        frontier_list.sort(key=lambda f: f.cost)
        logger.debug("Found %d frontiers from (%.2f, %.2f)", len(frontier_list), position[0], position[1])
        return frontier_list

    def _build_new_frontier(
        self,
        initial_cell: int,
        reference: int,
        frontier_flag: np.ndarray,
    ) -> Frontier:
        """
        Grows the frontier containing initial_cell with an 8-connected BFS.

        Every cell claimed here is marked in frontier_flag so no cell ends up
        in two frontiers. Distances are measured to the world coordinate of
        the reference cell.
        """
        output = Frontier()
        output.initial = self.costmap.index_to_world(initial_cell)

        reference_x, reference_y = self.costmap.index_to_world(reference)

        sum_x = 0.0
        sum_y = 0.0
        output.size = 0

        def add_cell(idx: int) -> None:
            nonlocal sum_x, sum_y
            wx, wy = self.costmap.index_to_world(idx)
            output.points.append((wx, wy))
            output.size += 1
            sum_x += wx
            sum_y += wy

            # Frontier distance goes by the cell closest to the reference
            distance = float(np.hypot(reference_x - wx, reference_y - wy))
            if distance < output.min_distance:
                output.min_distance = distance
                output.middle = (wx, wy)

        add_cell(initial_cell)

        bfs = deque([initial_cell])
        while bfs:
            idx = bfs.popleft()

            for nbr in nhood8(idx, self.costmap):
                if self._is_new_frontier_cell(nbr, frontier_flag):
                    frontier_flag[nbr] = True
                    add_cell(nbr)
                    bfs.append(nbr)

        output.centroid = (sum_x / output.size, sum_y / output.size)
        return output

    def _is_new_frontier_cell(self, idx: int, frontier_flag: np.ndarray) -> bool:
        # Unknown and not yet part of a frontier
        if self._map[idx] != NO_INFORMATION or frontier_flag[idx]:
            return False

        # Needs at least one free cell in the 4-connected neighbourhood
        for nbr in nhood4(idx, self.costmap):
            if self._map[nbr] == FREE_SPACE:
                return True

        return False
