from __future__ import annotations

from typing import Iterable

from bin_fit.geometry import volume
from bin_fit.models import Container, PlacementRecord


def placement_volume(record: PlacementRecord) -> int:
    return volume(record.orientation)


def compute_metrics(container: Container, records: Iterable[PlacementRecord]) -> tuple[int, int, float]:
    """Return (used_volume, container_volume, utilization in percent)."""
    used_volume = sum(placement_volume(r) for r in records)
    container_volume = volume(container.dimensions)
    utilization = 0.0 if container_volume == 0 else used_volume / container_volume * 100.0
    return used_volume, container_volume, utilization
