import numpy as np

from frontier_explorer.costmap import NO_INFORMATION, Costmap2D


def explored_area_m2(costmap: Costmap2D) -> float:
    """Calculates absolute explored area in square meters."""
    known_cells = int((costmap.data != NO_INFORMATION).sum())
    return known_cells * (costmap.resolution ** 2)


def coverage_percent(costmap: Costmap2D, navigable_area_m2: float = 0) -> float:
    """
    Calculates coverage percentage.
    If navigable_area_m2 is provided (>0), calculates % of that area.
    Otherwise, falls back to % of the whole costmap.
    """
    explored = explored_area_m2(costmap)

    if navigable_area_m2 > 0:
        return min(100.0, 100.0 * explored / navigable_area_m2)

    total_m2 = costmap.data.size * (costmap.resolution ** 2)
    return 100.0 * explored / total_m2


def entropy_proxy(costmap: Costmap2D) -> float:
    # Lower is better; simple proxy: fraction of unknown cells
    return float(np.mean(costmap.data == NO_INFORMATION))
