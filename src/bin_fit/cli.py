from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from bin_fit.config import load_options_from_env
from bin_fit.errors import PackingError
from bin_fit.export import build_visualization, write_visualization
from bin_fit.io.schemas import ContainerSchema, ItemSchema
from bin_fit.models import Container, Item
from bin_fit.packer import pack
from bin_fit.packing.ordering import ORDERING_POLICIES

logger = logging.getLogger(__name__)

EXIT_FITS = 0
EXIT_DOES_NOT_FIT = 1
EXIT_INVALID_INPUT = 2


def load_input(path: Path) -> tuple[Container, list[Item]]:
    """
    Read a JSON file of the form:
        {"container": {"length": 600, "width": 400, "height": 400},
         "items": [{"length": 380, "width": 320, "height": 100, "quantity": 2}]}
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if "container" not in data:
        raise ValueError("Input must include 'container'")

    container = ContainerSchema(**data["container"])
    items = [ItemSchema(**item) for item in data.get("items", [])]
    return container, items


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bin-fit",
        description="Check whether a set of boxes fits into a single container.",
    )
    parser.add_argument("input", type=Path, help="JSON file with 'container' and 'items'")
    parser.add_argument(
        "--warning-budget",
        type=float,
        default=None,
        help="Seconds before the search starts cutting branches (default: 3, or BIN_FIT_WARNING_BUDGET)",
    )
    parser.add_argument(
        "--ordering",
        choices=sorted(ORDERING_POLICIES),
        default=None,
        help="Order in which items are placed (default: volume, or BIN_FIT_ORDERING)",
    )
    parser.add_argument("--output", type=Path, default=None, help="Write 3D visualization JSON here")
    parser.add_argument("--html", type=Path, default=None, help="Write an interactive HTML viewer here")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        container, items = load_input(args.input)
        options = load_options_from_env(warning_budget=args.warning_budget, ordering=args.ordering)
        result = pack(container, items, options)
    except (OSError, ValueError, ValidationError, PackingError) as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    print(f"Container: {container.length} x {container.width} x {container.height}")
    print(f"Unit items: {result.unit_items}")
    if not result.fits:
        print("❌ The items cannot fit in the container.")
        return EXIT_DOES_NOT_FIT

    print("✅ The items can fit in the container.")
    print(f"  Used volume      : {result.used_volume}")
    print(f"  Container volume : {result.container_volume}")
    print(f"  Utilization      : {result.utilization:.2f}%")
    print(f"  Search time      : {result.elapsed_seconds:.3f}s")

    if args.output or args.html:
        data = build_visualization(result.placements, container)
        if args.output:
            print(f"3D visualization data saved as {write_visualization(data, args.output)}")
        if args.html:
            from bin_fit.viewer import write_viewer

            print(f"Open {write_viewer(data, args.html)} in your browser to view the packing")

    return EXIT_FITS


if __name__ == "__main__":
    sys.exit(main())
