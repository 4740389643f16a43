from __future__ import annotations

from bin_fit.geometry import (
    Orientation,
    PlacedItem,
    Position,
    boxes_overlap,
    fits_in_container,
    has_collision,
    volume,
    within_container,
)
from bin_fit.models import Container


def test_boxes_overlap_overlapping() -> None:
    """Test that overlapping boxes are detected."""
    # Box a: (0, 0, 0) to (2, 2, 2)
    a = (0, 0, 0, 2, 2, 2)
    # Box b: (1, 1, 1) to (3, 3, 3) - overlaps with a
    b = (1, 1, 1, 3, 3, 3)

    assert boxes_overlap(a, b) is True
    assert boxes_overlap(b, a) is True


def test_boxes_overlap_not_overlapping() -> None:
    """Test that non-overlapping boxes are detected."""
    a = (0, 0, 0, 1, 1, 1)
    b = (2, 2, 2, 3, 3, 3)

    assert boxes_overlap(a, b) is False


def test_touching_faces_do_not_overlap() -> None:
    a = (0, 0, 0, 2, 2, 2)
    # Shares the x = 2 face with a
    b = (2, 0, 0, 4, 2, 2)

    assert boxes_overlap(a, b) is False


def test_overlap_requires_all_three_axes() -> None:
    a = (0, 0, 0, 4, 4, 4)
    # Overlaps on x and y, but sits above a on z
    b = (1, 1, 4, 3, 3, 6)

    assert boxes_overlap(a, b) is False


def test_contained_box_overlaps() -> None:
    outer = (0, 0, 0, 10, 10, 10)
    inner = (2, 2, 2, 3, 3, 3)

    assert boxes_overlap(outer, inner) is True


def test_fits_in_container_checks_each_edge() -> None:
    container = Container(length=10, width=5, height=3)

    assert fits_in_container(Orientation(10, 5, 3), container) is True
    assert fits_in_container(Orientation(3, 5, 10), container) is False
    assert fits_in_container(Orientation(10, 6, 3), container) is False


def test_has_collision_against_trail() -> None:
    trail = [
        PlacedItem(Orientation(2, 2, 2), Position(0, 0, 0)),
        PlacedItem(Orientation(2, 2, 2), Position(2, 0, 0)),
    ]

    assert has_collision(PlacedItem(Orientation(2, 2, 2), Position(1, 0, 0)), trail) is True
    assert has_collision(PlacedItem(Orientation(2, 2, 2), Position(0, 2, 0)), trail) is False
    assert has_collision(PlacedItem(Orientation(2, 2, 2), Position(0, 0, 0)), []) is False


def test_within_container() -> None:
    container = Container(length=4, width=4, height=4)

    assert within_container(PlacedItem(Orientation(2, 2, 2), Position(2, 2, 2)), container) is True
    assert within_container(PlacedItem(Orientation(2, 2, 2), Position(3, 0, 0)), container) is False


def test_volume_does_not_overflow() -> None:
    """Edges near the 32-bit limit must not wrap around."""
    edge = 2**31 - 1

    assert volume((edge, edge, edge)) == edge**3
    assert volume((edge, edge, edge)) > 2**63
