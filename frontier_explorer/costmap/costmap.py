from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np


# Cost values shared with the navigation stack
FREE_SPACE = 0
INSCRIBED_INFLATED_OBSTACLE = 253
LETHAL_OBSTACLE = 254
NO_INFORMATION = 255


@dataclass
class CostmapSpec:

    # Defines geometry of the costmap.
    # Cells are addressed as (mx, my) or by the flat row-major index my * size_x + mx.
    # Origin is the world-frame coordinate of the lower-left corner of cell (0, 0).

    resolution: float  # meters per cell
    size_x: int
    size_y: int
    origin_x: float = 0.0
    origin_y: float = 0.0

    def __post_init__(self) -> None:
        if self.resolution <= 0:
            raise ValueError("CostmapSpec resolution must be positive.")
        if self.size_x <= 0 or self.size_y <= 0:
            raise ValueError("CostmapSpec must have at least one cell in each direction.")


class Costmap2D:
    """
    2D grid of traversal costs with the coordinate transforms the
    frontier search needs.

    The backing array has shape (size_y, size_x) and dtype uint8. Writers
    are expected to hold get_mutex() while they modify cells.
    """

    def __init__(self, spec: CostmapSpec, default_value: int = NO_INFORMATION) -> None:
        self.spec = spec
        self.default_value = default_value
        self.data = np.full((spec.size_y, spec.size_x), default_value, dtype=np.uint8)
        self._mutex = threading.RLock()

    @classmethod
    def from_occupancy(
        cls,
        values: np.ndarray,
        spec: CostmapSpec,
        lethal_threshold: int = 100,
    ) -> "Costmap2D":
        """
        Builds a costmap from a ROS-style occupancy array.

        Args:
            values: (size_y, size_x) array with -1 = unknown, 0 = free,
                100 = occupied and 1..99 occupancy probabilities.
            spec: geometry of the resulting costmap.
            lethal_threshold: occupancy at or above which a cell is lethal.
        """
        values = np.asarray(values)
        if values.shape != (spec.size_y, spec.size_x):
            raise ValueError(
                f"Occupancy shape {values.shape} does not match spec "
                f"({spec.size_y}, {spec.size_x})."
            )

        # Intermediate occupancy maps linearly onto the 1..252 cost band
        scaled = np.rint(1 + (values.astype(float) - 1) * 251.0 / 98.0)
        costs = np.clip(scaled, 1, 252).astype(np.uint8)

        costs[values == 0] = FREE_SPACE
        costs[values >= lethal_threshold] = LETHAL_OBSTACLE
        costs[values < 0] = NO_INFORMATION

        costmap = cls(spec)
        costmap.data[:, :] = costs
        return costmap

    @classmethod
    def from_trinary(cls, grid: np.ndarray, spec: CostmapSpec) -> "Costmap2D":
        """
        Builds a costmap from a {-1: unknown, 0: free, 1: occupied} array.
        """
        grid = np.asarray(grid)
        if grid.shape != (spec.size_y, spec.size_x):
            raise ValueError(
                f"Grid shape {grid.shape} does not match spec "
                f"({spec.size_y}, {spec.size_x})."
            )

        costmap = cls(spec)
        costmap.data[grid == 0] = FREE_SPACE
        costmap.data[grid == 1] = LETHAL_OBSTACLE
        costmap.data[grid == -1] = NO_INFORMATION
        return costmap

    def reset_map(self, value: Optional[int] = None) -> None:
        with self._mutex:
            self.data.fill(self.default_value if value is None else value)

    def get_mutex(self) -> threading.RLock:
        return self._mutex

    @property
    def resolution(self) -> float:
        return self.spec.resolution

    @property
    def size_in_cells_x(self) -> int:
        return self.spec.size_x

    @property
    def size_in_cells_y(self) -> int:
        return self.spec.size_y

    @property
    def char_map(self) -> np.ndarray:
        # Flat view; index with get_index(mx, my)
        return self.data.reshape(-1)

    def in_bounds(self, mx: int, my: int) -> bool:
        return 0 <= mx < self.spec.size_x and 0 <= my < self.spec.size_y

    def world_to_map(self, wx: float, wy: float) -> Optional[Tuple[int, int]]:

        # Converts world coordinates (meters) to cell indices (mx, my).
        # Returns None when the point lies outside the costmap or is not finite.

        if not (np.isfinite(wx) and np.isfinite(wy)):
            return None
        if wx < self.spec.origin_x or wy < self.spec.origin_y:
            return None

        fx = (wx - self.spec.origin_x) / self.spec.resolution
        fy = (wy - self.spec.origin_y) / self.spec.resolution

        if fx < self.spec.size_x and fy < self.spec.size_y:
            return int(fx), int(fy)
        return None

    def map_to_world(self, mx: int, my: int) -> Tuple[float, float]:

        # Returns center of cell (mx, my) in world coordinates

        wx = self.spec.origin_x + (mx + 0.5) * self.spec.resolution
        wy = self.spec.origin_y + (my + 0.5) * self.spec.resolution
        return wx, wy

    def get_index(self, mx: int, my: int) -> int:
        return my * self.spec.size_x + mx

    def index_to_cells(self, idx: int) -> Tuple[int, int]:
        my = idx // self.spec.size_x
        mx = idx - my * self.spec.size_x
        return mx, my

    def index_to_world(self, idx: int) -> Tuple[float, float]:
        return self.map_to_world(*self.index_to_cells(idx))

    def get_cost(self, mx: int, my: int) -> int:
        return int(self.data[my, mx])

    def set_cost(self, mx: int, my: int, cost: int) -> None:
        self.data[my, mx] = cost
