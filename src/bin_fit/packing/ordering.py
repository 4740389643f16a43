"""Ordering policies deciding which unit item the search places first."""

from __future__ import annotations

from typing import Union

from bin_fit.config import OrderingPolicy
from bin_fit.errors import UnknownOrderingPolicy
from bin_fit.geometry import volume
from bin_fit.models import Item


def item_volume(item: Item) -> int:
    return volume(item.dimensions)


def max_base_area(item: Item) -> int:
    """Largest footprint the item can show when rotated onto any face."""
    L, W, H = item.dimensions
    return max(L * W, L * H, W * H)


def by_volume(items: list[Item]) -> list[Item]:
    """Largest volume first."""
    return sorted(items, key=item_volume, reverse=True)


def by_base_area(items: list[Item]) -> list[Item]:
    """
    Largest possible base area first.

    Items with the same base area are placed by volume, largest first.
    """
    return sorted(items, key=lambda it: (max_base_area(it), item_volume(it)), reverse=True)


def by_dimensions(items: list[Item]) -> list[Item]:
    """
    Longest edge first, then the middle edge, then the shortest.

    Suits loads with many long, thin items.
    """
    return sorted(items, key=lambda it: sorted(it.dimensions, reverse=True), reverse=True)


ORDERING_POLICIES: dict[str, OrderingPolicy] = {
    "volume": by_volume,
    "base_area": by_base_area,
    "dimensions": by_dimensions,
}


def resolve_ordering(policy: Union[str, OrderingPolicy]) -> OrderingPolicy:
    if callable(policy):
        return policy
    key = policy.strip().lower()
    if key not in ORDERING_POLICIES:
        raise UnknownOrderingPolicy(policy, sorted(ORDERING_POLICIES))
    return ORDERING_POLICIES[key]
