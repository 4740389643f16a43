"""Entry point deciding whether a list of items fits into one container."""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional, Sequence

from bin_fit.config import PackOptions
from bin_fit.errors import InvalidDimension, InvalidQuantity
from bin_fit.geometry import volume
from bin_fit.metrics import compute_metrics
from bin_fit.models import Container, Item, PackingResult, PlacementRecord
from bin_fit.packing.backtracking import BacktrackingSearch, PackingSession
from bin_fit.packing.ordering import resolve_ordering

logger = logging.getLogger(__name__)


def validate_inputs(container: Container, items: Sequence[Item]) -> None:
    """Reject negative edges and quantities before any volume arithmetic."""
    for name, value in zip(("length", "width", "height"), container.dimensions):
        if value < 0:
            raise InvalidDimension("container", name, value)
    for i, item in enumerate(items):
        for name, value in zip(("length", "width", "height"), item.dimensions):
            if value < 0:
                raise InvalidDimension(f"item {i}", name, value)
        if item.quantity < 0:
            raise InvalidQuantity(i, item.quantity)


def total_volume(items: Sequence[Item]) -> int:
    return sum(volume(item.dimensions) * item.quantity for item in items)


def expand_quantities(items: Sequence[Item]) -> list[Item]:
    """One unit item (quantity 1) per requested copy."""
    return [
        item.model_copy(update={"quantity": 1})
        for item in items
        for _ in range(item.quantity)
    ]


class BinPacker:
    """
    Runs one packing search at a time against a fixed container.

    After a successful pack(), get_item_placements() returns the witness:
    one PlacementRecord per unit item, in the order they were confirmed
    while the recursion unwound (deepest item first).
    """

    def __init__(
        self,
        container: Container,
        options: Optional[PackOptions] = None,
        clock: Callable[[], float] = time.perf_counter,
    ):
        self.container = container
        self.options = options if options is not None else PackOptions()
        self.session = PackingSession(container=container, items=[], options=self.options, clock=clock)

    def pack(self, items: Sequence[Item]) -> bool:
        """Return True if every item (with its quantity) fits into the container."""
        # Drop the witness of any previous run, even if this one is refused
        self.session.items = []
        self.session.reset()
        validate_inputs(self.container, items)

        # Volume can only rule a packing out, never in
        requested = total_volume(items)
        available = volume(self.container.dimensions)
        if requested > available:
            logger.info(f"Rejected without search: item volume {requested} > container volume {available}")
            return False

        if not items or all(d == 0 for d in self.container.dimensions):
            logger.debug("Nothing to place: trivially fits")
            return True

        ordering = resolve_ordering(self.options.ordering)
        unit_items = ordering(expand_quantities(items))

        self.session.items = list(unit_items)
        self.session.reset()

        fits = BacktrackingSearch(self.session).run()
        logger.info(
            f"fits={fits}, unit_items={len(unit_items)}, "
            f"elapsed={self.session.elapsed():.3f}s, restricted={self.session.restricted}"
        )
        return fits

    def get_item_placements(self) -> list[PlacementRecord]:
        return list(self.session.item_placements)


def can_pack(container: Container, items: Sequence[Item], options: Optional[PackOptions] = None) -> bool:
    """Return True if all items can be placed in the container at once."""
    return BinPacker(container, options).pack(items)


def pack(container: Container, items: Sequence[Item], options: Optional[PackOptions] = None) -> PackingResult:
    """Run the check and bundle the verdict, the witness and its metrics."""
    packer = BinPacker(container, options)
    started = time.perf_counter()
    fits = packer.pack(items)
    elapsed = time.perf_counter() - started

    placements = packer.get_item_placements() if fits else []
    used_volume, container_volume, utilization = compute_metrics(container, placements)

    return PackingResult(
        fits=fits,
        placements=placements,
        unit_items=sum(item.quantity for item in items),
        used_volume=used_volume,
        container_volume=container_volume,
        utilization=utilization,
        elapsed_seconds=elapsed,
    )
