# Visualization of costmaps and detected frontiers using Matplotlib

import logging
from pathlib import Path
from typing import List, Optional, Tuple

import numpy as np
import matplotlib.pyplot as plt

from frontier_explorer.costmap import FREE_SPACE, LETHAL_OBSTACLE, NO_INFORMATION, Costmap2D
from .types import Frontier

logger = logging.getLogger(__name__)


def costmap_image(costmap: Costmap2D) -> np.ndarray:
    """
    Maps costs to gray levels for imshow:
    free -> 0.0 (white with gray_r), unknown -> 0.5, lethal -> 1.0,
    intermediate costs scaled in between.
    """
    data = costmap.data.astype(float)
    image = np.clip(data / LETHAL_OBSTACLE, 0.0, 1.0)
    image[costmap.data == FREE_SPACE] = 0.0
    image[costmap.data == NO_INFORMATION] = 0.5
    return image


def plot_frontiers(
    costmap: Costmap2D,
    frontiers: List[Frontier],
    position: Optional[Tuple[float, float]] = None,
    hazard: Optional[Tuple[float, float]] = None,
    title: str = "Frontiers",
    output_path: Optional[str] = None,
) -> None:
    """
    Plot the costmap with every frontier's cells, centroid and middle point.
    - Map: gray_r colormap (Dark=Lethal, Gray=Unknown, Light=Free)
    - Frontier cells: one color per frontier, cheapest first in the legend
    - Robot: Red dot
    - Hazard: Black cross
    """
    spec = costmap.spec
    fig, ax = plt.subplots(figsize=(8, 8))

    extent = [
        spec.origin_x,
        spec.origin_x + spec.size_x * spec.resolution,
        spec.origin_y,
        spec.origin_y + spec.size_y * spec.resolution,
    ]
    ax.imshow(costmap_image(costmap), cmap='gray_r', origin='lower', extent=extent, vmin=0.0, vmax=1.0)

    colors = plt.cm.tab10(np.linspace(0, 1, max(1, len(frontiers))))
    for rank, (frontier, color) in enumerate(zip(frontiers, colors)):
        pts = np.asarray(frontier.points)
        ax.scatter(pts[:, 0], pts[:, 1], color=color, s=4, label=f"#{rank} cost={frontier.cost:.2f}")
        ax.scatter(*frontier.centroid, color=color, marker='o', s=40, edgecolors='k')
        ax.scatter(*frontier.middle, color=color, marker='^', s=40, edgecolors='k')

    if position is not None:
        ax.scatter(position[0], position[1], c='red', s=20, zorder=10, label='Robot')

    if hazard is not None:
        ax.scatter(hazard[0], hazard[1], c='black', marker='x', s=60, zorder=10, label='Hazard')

    ax.set_title(title)
    ax.set_xlabel("X (m)")
    ax.set_ylabel("Y (m)")
    ax.set_aspect('equal')
    if frontiers or position is not None or hazard is not None:
        ax.legend(loc='upper right', fontsize='small')

    if output_path:
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(output_path, dpi=150, bbox_inches='tight')
        logger.info("Saved visualization to %s", output_path)

    plt.close(fig)
