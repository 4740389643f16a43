from __future__ import annotations

from bin_fit.geometry import Orientation
from bin_fit.models import Item
from bin_fit.packing.orientations import generate_orientations


def test_cube_has_one_orientation() -> None:
    assert generate_orientations(Item(length=5, width=5, height=5)) == [Orientation(5, 5, 5)]


def test_two_equal_edges_have_three_orientations() -> None:
    orientations = generate_orientations(Item(length=4, width=4, height=9))

    assert len(orientations) == 3
    assert set(orientations) == {(4, 4, 9), (4, 9, 4), (9, 4, 4)}


def test_distinct_edges_have_six_orientations() -> None:
    orientations = generate_orientations(Item(length=1, width=2, height=3))

    assert len(orientations) == 6
    assert len(set(orientations)) == 6


def test_orientation_order_is_stable() -> None:
    item = Item(length=380, width=320, height=220)

    first = generate_orientations(item)
    second = generate_orientations(item)

    assert first == second
    assert first == [
        (380, 320, 220),
        (380, 220, 320),
        (320, 380, 220),
        (320, 220, 380),
        (220, 380, 320),
        (220, 320, 380),
    ]


def test_quantity_does_not_change_orientations() -> None:
    assert generate_orientations(Item(length=1, width=2, height=3, quantity=7)) == generate_orientations(
        Item(length=1, width=2, height=3)
    )
