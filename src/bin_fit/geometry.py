"""Geometry utilities for container packing."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, NamedTuple

if TYPE_CHECKING:
    from .models import Container


Bounds = tuple[int, int, int, int, int, int]


class Orientation(NamedTuple):
    """Oriented dimensions (L, W, H) of an item, one of its axis permutations."""

    length: int
    width: int
    height: int


class Position(NamedTuple):
    """Container-space coordinate of an item's minimum corner."""

    x: int
    y: int
    z: int


ORIGIN = Position(0, 0, 0)


class PlacedItem(NamedTuple):
    """An orientation bound to a position."""

    orientation: Orientation
    position: Position


def volume(dims: Iterable[int]) -> int:
    """
    Product of the three edge lengths.

    Python integers do not overflow, so this is safe for container volumes
    well beyond 64-bit products.
    """
    length, width, height = dims
    return int(length) * int(width) * int(height)


def fits_in_container(orientation: Orientation, container: "Container") -> bool:
    """Check that every edge of the orientation is within the matching container edge."""
    return (
        orientation.length <= container.length
        and orientation.width <= container.width
        and orientation.height <= container.height
    )


def boxes_overlap(a: Bounds, b: Bounds) -> bool:
    """
    Axis-aligned bounding box (AABB) overlap test.

    a, b are bounds: (x1, y1, z1, x2, y2, z2)

    Overlap exists only if they overlap on ALL 3 axes with positive volume.
    Touching faces/edges (ax2 == bx1) is NOT considered overlap.
    """
    ax1, ay1, az1, ax2, ay2, az2 = a
    bx1, by1, bz1, bx2, by2, bz2 = b

    return (ax1 < bx2 and bx1 < ax2) and (ay1 < by2 and by1 < ay2) and (az1 < bz2 and bz1 < az2)


def placed_bounds(placed: PlacedItem) -> Bounds:
    (L, W, H), (x, y, z) = placed
    return (x, y, z, x + L, y + W, z + H)


def has_collision(candidate: PlacedItem, placed_items: Iterable[PlacedItem]) -> bool:
    """Return True if the candidate overlaps any already placed item."""
    candidate_bounds = placed_bounds(candidate)
    for placed in placed_items:
        if boxes_overlap(candidate_bounds, placed_bounds(placed)):
            return True
    return False


def within_container(placed: PlacedItem, container: "Container") -> bool:
    """Check that a placed item lies entirely inside the container."""
    x1, y1, z1, x2, y2, z2 = placed_bounds(placed)
    return (
        x1 >= 0
        and y1 >= 0
        and z1 >= 0
        and x2 <= container.length
        and y2 <= container.width
        and z2 <= container.height
    )
