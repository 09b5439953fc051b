import numpy as np
import pytest

from frontier_explorer.costmap import (
    FREE_SPACE,
    LETHAL_OBSTACLE,
    NO_INFORMATION,
    Costmap2D,
    CostmapSpec,
)


def test_world_map_round_trip_uses_cell_centers():
    cm = Costmap2D(CostmapSpec(resolution=0.5, size_x=4, size_y=3, origin_x=-1.0, origin_y=2.0))

    assert cm.world_to_map(-1.0, 2.0) == (0, 0)
    assert cm.world_to_map(0.74, 3.2) == (3, 2)
    assert cm.map_to_world(0, 0) == pytest.approx((-0.75, 2.25))
    assert cm.map_to_world(3, 2) == pytest.approx((0.75, 3.25))


def test_world_to_map_rejects_points_outside():
    cm = Costmap2D(CostmapSpec(resolution=1.0, size_x=5, size_y=5))

    assert cm.world_to_map(-0.01, 1.0) is None
    assert cm.world_to_map(1.0, -0.01) is None
    assert cm.world_to_map(5.0, 1.0) is None
    assert cm.world_to_map(1.0, 5.0) is None
    assert cm.world_to_map(4.99, 4.99) == (4, 4)


def test_world_to_map_rejects_non_finite_points():
    cm = Costmap2D(CostmapSpec(resolution=0.05, size_x=5, size_y=5))

    assert cm.world_to_map(float("nan"), 0.1) is None
    assert cm.world_to_map(0.1, float("nan")) is None
    assert cm.world_to_map(float("inf"), 0.1) is None
    assert cm.world_to_map(0.1, float("-inf")) is None
    # finite, but overflows to inf once divided by the resolution
    assert cm.world_to_map(1e308, 0.1) is None


def test_index_conversions_are_row_major():
    cm = Costmap2D(CostmapSpec(resolution=1.0, size_x=4, size_y=3))

    assert cm.get_index(1, 2) == 9
    assert cm.index_to_cells(9) == (1, 2)
    assert cm.index_to_world(9) == pytest.approx((1.5, 2.5))

    cm.set_cost(1, 2, 42)
    assert cm.get_cost(1, 2) == 42
    assert cm.char_map[9] == 42


def test_new_costmap_is_unknown_and_resettable():
    cm = Costmap2D(CostmapSpec(resolution=1.0, size_x=3, size_y=3))
    assert np.all(cm.data == NO_INFORMATION)

    cm.reset_map(FREE_SPACE)
    assert np.all(cm.data == FREE_SPACE)

    cm.reset_map()
    assert np.all(cm.data == NO_INFORMATION)


def test_from_occupancy_translates_values():
    spec = CostmapSpec(resolution=1.0, size_x=5, size_y=1)
    cm = Costmap2D.from_occupancy(np.array([[-1, 0, 1, 99, 100]]), spec)

    assert list(cm.char_map) == [NO_INFORMATION, FREE_SPACE, 1, 252, LETHAL_OBSTACLE]


def test_from_occupancy_shape_mismatch():
    spec = CostmapSpec(resolution=1.0, size_x=2, size_y=2)
    with pytest.raises(ValueError):
        Costmap2D.from_occupancy(np.zeros((3, 2)), spec)


def test_from_trinary():
    spec = CostmapSpec(resolution=1.0, size_x=3, size_y=1)
    cm = Costmap2D.from_trinary(np.array([[-1, 0, 1]]), spec)

    assert list(cm.char_map) == [NO_INFORMATION, FREE_SPACE, LETHAL_OBSTACLE]


@pytest.mark.parametrize("kwargs", [
    dict(resolution=0.0, size_x=2, size_y=2),
    dict(resolution=1.0, size_x=0, size_y=2),
    dict(resolution=1.0, size_x=2, size_y=-1),
])
def test_invalid_spec(kwargs):
    with pytest.raises(ValueError):
        CostmapSpec(**kwargs)
