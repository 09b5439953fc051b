from dataclasses import dataclass, field
from typing import List, Tuple

Point = Tuple[float, float]  # world (x, y) in meters


@dataclass
class Frontier:
    """Represents a connected cluster of unknown cells bordering free space."""
    size: int = 1                      # Number of cells, seed included
    min_distance: float = float("inf") # Closest cell to the reference cell [m]
    cost: float = 0.0                  # Exploration cost, lower is better
    initial: Point = (0.0, 0.0)        # Seed cell that triggered discovery
    centroid: Point = (0.0, 0.0)       # Mean of points
    middle: Point = (0.0, 0.0)         # Cell closest to the reference cell
    points: List[Point] = field(default_factory=list)  # Cells in discovery order
