from .costmap import (
    FREE_SPACE,
    INSCRIBED_INFLATED_OBSTACLE,
    LETHAL_OBSTACLE,
    NO_INFORMATION,
    Costmap2D,
    CostmapSpec,
)
from .tools import nearest_cell, nhood4, nhood8

__all__ = [
    "FREE_SPACE",
    "INSCRIBED_INFLATED_OBSTACLE",
    "LETHAL_OBSTACLE",
    "NO_INFORMATION",
    "Costmap2D",
    "CostmapSpec",
    "nearest_cell",
    "nhood4",
    "nhood8",
]
