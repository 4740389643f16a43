from __future__ import annotations

from typing import Collection, Sequence

from bin_fit.geometry import ORIGIN, Orientation, PlacedItem, Position
from bin_fit.models import Container


def generate_candidate_points(placed_items: Sequence[PlacedItem], used: Collection[Position]) -> list[Position]:
    """
    Extreme-points style candidates:
      start with origin,
      add (x, y, z+H), (x+L, y, z), (x, y+W, z) for each placed item.
    Anchors already claimed in `used` are skipped and repeated anchors keep
    their first occurrence, so the order follows the placement trail.
    """
    points: list[Position] = []
    seen: set[Position] = set()

    def add(point: Position) -> None:
        if point in used or point in seen:
            return
        seen.add(point)
        points.append(point)

    add(ORIGIN)
    for (L, W, H), (x, y, z) in placed_items:
        add(Position(x, y, z + H))  # top
        add(Position(x + L, y, z))  # right
        add(Position(x, y + W, z))  # front
    return points


def find_candidate_positions(
    orientation: Orientation,
    placed_items: Sequence[PlacedItem],
    container: Container,
    used: Collection[Position],
) -> list[Position]:
    """
    Return the anchors at which `orientation` stays inside the container.

    A zero-size item exposes no anchor other than its own position, so once
    it claims the origin a second zero-size item has nowhere to go.
    """
    if not placed_items:
        return [] if ORIGIN in used else [ORIGIN]

    L, W, H = orientation
    return [
        p
        for p in generate_candidate_points(placed_items, used)
        if p.x >= 0
        and p.y >= 0
        and p.z >= 0
        and p.x + L <= container.length
        and p.y + W <= container.width
        and p.z + H <= container.height
    ]
