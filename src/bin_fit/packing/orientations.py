from __future__ import annotations

from bin_fit.geometry import Orientation
from bin_fit.models import Item


def generate_orientations(item: Item) -> list[Orientation]:
    """
    Return the distinct axis-aligned orientations of an item.

    The six permutations are always produced in the same order:
      (L,W,H) (L,H,W) (W,L,H) (W,H,L) (H,L,W) (H,W,L)
    and duplicates (cubes, two equal edges) keep their first occurrence,
    so a cube yields 1 orientation, two equal edges yield 3, otherwise 6.
    """
    L, W, H = item.length, item.width, item.height
    dims = [
        (L, W, H),
        (L, H, W),
        (W, L, H),
        (W, H, L),
        (H, L, W),
        (H, W, L),
    ]
    seen: set[tuple[int, int, int]] = set()
    out: list[Orientation] = []
    for key in dims:
        if key not in seen:
            seen.add(key)
            out.append(Orientation(*key))
    return out
