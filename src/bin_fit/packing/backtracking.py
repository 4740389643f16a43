# src/bin_fit/packing/backtracking.py
"""
Time-boxed recursive backtracking over unit items.

Each recursion level places one unit item: it enumerates the item's
orientations, generates extreme-point anchors for each, rejects anchors that
collide with the current trail and recurses on the rest. Once the elapsed
time passes a fraction of the warning budget the branching factor is cut,
and past the budget itself failed branches abort their whole level. The
search may therefore answer "does not fit" for a packable input once the
budget is spent; that is the accepted price for always returning promptly.
"""

from __future__ import annotations

import logging
import sys
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterator

from bin_fit.config import PackOptions
from bin_fit.geometry import Orientation, PlacedItem, Position, fits_in_container, has_collision
from bin_fit.models import Container, Item, PlacementRecord
from bin_fit.packing.extreme_points import find_candidate_positions
from bin_fit.packing.orientations import generate_orientations

logger = logging.getLogger(__name__)

Trail = tuple[PlacedItem, ...]


def should_exit_early(
    elapsed: float,
    position_index: int,
    orientation_index: int,
    budget: float,
    restrict_multiple: float = 1.0,
    abort_multiple: float = 2.0,
) -> bool:
    """
    Decide whether a failed branch should abandon the rest of its level.

    - past budget * restrict_multiple: abort once a second position or a
      second orientation has been tried;
    - past budget * abort_multiple: always abort.
    """
    if elapsed > budget * restrict_multiple and (position_index >= 1 or orientation_index >= 1):
        return True
    if elapsed > budget * abort_multiple:
        return True
    return False


@dataclass
class PackingSession:
    """Mutable state shared by every frame of one packing run."""

    container: Container
    items: list[Item]
    options: PackOptions = field(default_factory=PackOptions)
    clock: Callable[[], float] = time.perf_counter
    start_time: float = 0.0
    used_positions: set[Position] = field(default_factory=set)
    item_placements: list[PlacementRecord] = field(default_factory=list)
    restricted: bool = False
    aborted: bool = False

    def reset(self) -> None:
        self.used_positions = set()
        self.item_placements = []
        self.restricted = False
        self.aborted = False
        self.start_time = self.clock()

    def elapsed(self) -> float:
        return self.clock() - self.start_time

    @contextmanager
    def claim(self, position: Position) -> Iterator[Position]:
        """Mark an anchor as used for the duration of one placement attempt."""
        self.used_positions.add(position)
        try:
            yield position
        finally:
            self.used_positions.discard(position)


class _Outcome(Enum):
    PLACED = "placed"
    EXHAUSTED = "exhausted"
    ABORTED = "aborted"


class BacktrackingSearch:
    """Depth-first search placing session.items[index:] on top of a trail."""

    # Frames per item: _pack_from + _try_orientation
    FRAMES_PER_ITEM = 2
    FRAME_HEADROOM = 200

    def __init__(self, session: PackingSession):
        self.session = session

    def run(self) -> bool:
        previous_limit = sys.getrecursionlimit()
        self._ensure_recursion_limit(len(self.session.items))
        try:
            return self._pack_from(0, ())
        finally:
            if sys.getrecursionlimit() != previous_limit:
                sys.setrecursionlimit(previous_limit)

    def _ensure_recursion_limit(self, n_items: int) -> None:
        """Raise the interpreter limit for this run; run() puts it back."""
        needed = n_items * self.FRAMES_PER_ITEM + self.FRAME_HEADROOM
        if needed > sys.getrecursionlimit():
            logger.debug(f"Raising recursion limit to {needed} for {n_items} unit items")
            sys.setrecursionlimit(needed)

    def _pack_from(self, index: int, placed: Trail) -> bool:
        session = self.session
        if index >= len(session.items):
            return True

        options = session.options
        near_timeout = session.elapsed() > options.warning_budget * options.restrict_fraction
        if near_timeout and not session.restricted:
            session.restricted = True
            logger.debug(f"Near timeout at item {index}: restricting orientations and positions")

        orientations = generate_orientations(session.items[index])
        if near_timeout and len(orientations) > options.near_timeout_orientations:
            orientations = orientations[: options.near_timeout_orientations]

        for orientation_index, orientation in enumerate(orientations):
            if not fits_in_container(orientation, session.container):
                continue

            outcome = self._try_orientation(index, placed, orientation, orientation_index, near_timeout)
            if outcome is _Outcome.PLACED:
                return True
            if outcome is _Outcome.ABORTED:
                return False

            # Near timeout a single failed orientation ends this level
            if near_timeout:
                break

        return False

    def _try_orientation(
        self,
        index: int,
        placed: Trail,
        orientation: Orientation,
        orientation_index: int,
        near_timeout: bool,
    ) -> _Outcome:
        session = self.session
        options = session.options

        positions = find_candidate_positions(orientation, placed, session.container, session.used_positions)
        if near_timeout and len(positions) > options.near_timeout_positions:
            positions = positions[: options.near_timeout_positions]

        for position_index, position in enumerate(positions):
            with session.claim(position):
                candidate = PlacedItem(orientation, position)
                if has_collision(candidate, placed):
                    continue

                if self._pack_from(index + 1, placed + (candidate,)):
                    session.item_placements.append(
                        PlacementRecord(item_index=index, position=position, orientation=orientation)
                    )
                    return _Outcome.PLACED

                if self._should_exit_early(position_index, orientation_index):
                    return _Outcome.ABORTED

        return _Outcome.EXHAUSTED

    def _should_exit_early(self, position_index: int, orientation_index: int) -> bool:
        session = self.session
        options = session.options
        exit_early = should_exit_early(
            session.elapsed(),
            position_index,
            orientation_index,
            options.warning_budget,
            restrict_multiple=options.restrict_multiple,
            abort_multiple=options.abort_multiple,
        )
        if exit_early and not session.aborted:
            session.aborted = True
            logger.debug("Warning budget exceeded: abandoning remaining branches")
        return exit_early
