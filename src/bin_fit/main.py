from __future__ import annotations

import logging

from bin_fit.export import build_visualization, write_visualization
from bin_fit.models import Container, Item
from bin_fit.packer import pack


def run_case(container: Container, items: list[Item]) -> bool:
    print("\n" + "=" * 60)
    print(f"📦 CONTAINER: {container.length} x {container.width} x {container.height}")
    for item in items:
        print(f"  item {item.length} x {item.width} x {item.height} (qty {item.quantity})")

    result = pack(container, items)

    if not result.fits:
        print("❌ The items cannot fit in the container.")
        return False

    print("✅ The items can fit in the container.")
    print("\n📦 PLACEMENTS:")
    for record in sorted(result.placements, key=lambda r: r.item_index):
        print(f"  #{record.item_index}: at {tuple(record.position)} as {tuple(record.orientation)}")

    print("\n📊 SPACE UTILIZATION:")
    print(f"  Container volume : {result.container_volume}")
    print(f"  Items volume     : {result.used_volume}")
    print(f"  Utilization      : {result.utilization:.2f}%")

    data = build_visualization(result.placements, container)
    print(f"\n3D visualization data saved as {write_visualization(data, 'bin_packing_3d.json')}")
    from bin_fit.viewer import write_viewer

    print(f"Open {write_viewer(data, 'bin_packing_viewer.html')} in your browser to view it")
    return True


def main() -> None:
    logging.basicConfig(level=logging.INFO)

    container = Container(length=600, width=400, height=400)
    items = [
        Item(length=380, width=320, height=100, quantity=2),
        Item(length=380, width=320, height=220, quantity=1),
        Item(length=380, width=320, height=200, quantity=1),
        Item(length=40, width=210, height=80, quantity=12),
    ]
    run_case(container, items)


if __name__ == "__main__":
    main()
