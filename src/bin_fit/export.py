"""JSON export of a witness placement for the 3D viewer."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Sequence

from bin_fit.metrics import compute_metrics
from bin_fit.models import Container, PlacementRecord

logger = logging.getLogger(__name__)

COLORS = [
    "#ff6464",  # red
    "#64ff64",  # green
    "#6464ff",  # blue
    "#ffff64",  # yellow
    "#ff64ff",  # magenta
    "#64ffff",  # cyan
    "#ff9664",  # orange
    "#9664ff",  # purple
    "#64ff96",  # light green
    "#ffc896",  # peach
]


def build_visualization(records: Sequence[PlacementRecord], container: Container) -> dict[str, Any]:
    """
    Build the viewer payload from placement records.

    Returns:
        {"container": {...}, "items": [...], "stats": {...}} with JSON primitives only.
        Item ids start at 1 and follow the order of `records`.
    """
    items = []
    for i, record in enumerate(records):
        x, y, z = record.position
        L, W, H = record.orientation
        items.append(
            {
                "id": i + 1,
                "position": {"x": x, "y": y, "z": z},
                "dimensions": {"length": L, "width": W, "height": H},
                "color": COLORS[i % len(COLORS)],
            }
        )

    used_volume, container_volume, utilization = compute_metrics(container, records)

    return {
        "container": {
            "length": container.length,
            "width": container.width,
            "height": container.height,
        },
        "items": items,
        "stats": {
            "totalItems": len(items),
            "containerVolume": container_volume,
            "itemsVolume": used_volume,
            "utilizationRate": utilization,
        },
    }


def write_visualization(data: dict[str, Any], path: str | Path = "bin_packing_3d.json") -> Path:
    """
    Write the viewer payload to a JSON file.

    Creates parent folders if needed and overwrites the file on every run.
    """
    output_path = Path(path).resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
    logger.info(f"3D visualization data written to {output_path}")
    return output_path
