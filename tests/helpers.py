import numpy as np

from frontier_explorer.costmap import Costmap2D, CostmapSpec

UNKNOWN, FREE, OCCUPIED = -1, 0, 1


def make_costmap(rows, resolution=1.0, origin=(0.0, 0.0)):
    """
    rows are listed bottom-up: rows[my][mx], so rows[0] is the y = origin row.
    """
    g = np.array(rows)
    spec = CostmapSpec(
        resolution=resolution,
        size_x=g.shape[1],
        size_y=g.shape[0],
        origin_x=origin[0],
        origin_y=origin[1],
    )
    return Costmap2D.from_trinary(g, spec)


class FixedNoise:
    """Stand-in for np.random.Generator that replays given samples."""

    def __init__(self, *samples):
        self.samples = list(samples) or [0.0]
        self.calls = 0

    def normal(self, mean, std):
        value = self.samples[min(self.calls, len(self.samples) - 1)]
        self.calls += 1
        return value
