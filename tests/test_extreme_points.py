from __future__ import annotations

from bin_fit.geometry import ORIGIN, Orientation, PlacedItem, Position
from bin_fit.models import Container
from bin_fit.packing.extreme_points import find_candidate_positions, generate_candidate_points


def test_empty_trail_yields_origin_only() -> None:
    container = Container(length=10, width=10, height=10)

    assert find_candidate_positions(Orientation(2, 2, 2), [], container, set()) == [ORIGIN]


def test_empty_trail_with_used_origin_yields_nothing() -> None:
    container = Container(length=10, width=10, height=10)

    assert find_candidate_positions(Orientation(2, 2, 2), [], container, {ORIGIN}) == []


def test_extreme_points_order_top_right_front() -> None:
    trail = [PlacedItem(Orientation(4, 3, 2), Position(0, 0, 0))]

    points = generate_candidate_points(trail, {ORIGIN})

    assert points == [Position(0, 0, 2), Position(4, 0, 0), Position(0, 3, 0)]


def test_origin_is_offered_when_unused() -> None:
    trail = [PlacedItem(Orientation(4, 3, 2), Position(4, 0, 0))]

    points = generate_candidate_points(trail, set())

    assert points[0] == ORIGIN
    assert points[1:] == [Position(4, 0, 2), Position(8, 0, 0), Position(4, 3, 0)]


def test_used_and_duplicate_anchors_are_skipped() -> None:
    trail = [
        PlacedItem(Orientation(2, 2, 2), Position(0, 0, 0)),
        # Sits on the first item's right anchor, which is therefore used
        PlacedItem(Orientation(2, 2, 2), Position(2, 0, 0)),
        # Right anchor (2, 2, 0) repeats the second item's front anchor
        PlacedItem(Orientation(2, 2, 2), Position(0, 2, 0)),
    ]
    used = {ORIGIN, Position(2, 0, 0), Position(0, 2, 0)}

    points = generate_candidate_points(trail, used)

    assert len(points) == len(set(points))
    assert not used.intersection(points)
    assert points == [
        Position(0, 0, 2),
        Position(2, 0, 2),
        Position(4, 0, 0),
        Position(2, 2, 0),
        Position(0, 2, 2),
        Position(0, 4, 0),
    ]


def test_positions_are_filtered_by_container_bounds() -> None:
    container = Container(length=6, width=4, height=4)
    trail = [PlacedItem(Orientation(4, 4, 2), Position(0, 0, 0))]

    positions = find_candidate_positions(Orientation(2, 4, 2), trail, container, {ORIGIN})

    # top (0,0,2) fits, right (4,0,0) fits, front (0,4,0) leaves the container
    assert positions == [Position(0, 0, 2), Position(4, 0, 0)]


def test_oversized_orientation_has_no_positions() -> None:
    container = Container(length=6, width=4, height=4)
    trail = [PlacedItem(Orientation(4, 4, 2), Position(0, 0, 0))]

    assert find_candidate_positions(Orientation(5, 4, 3), trail, container, {ORIGIN}) == []


def test_zero_size_item_exposes_no_new_anchor() -> None:
    trail = [PlacedItem(Orientation(0, 0, 0), ORIGIN)]

    assert generate_candidate_points(trail, {ORIGIN}) == []
