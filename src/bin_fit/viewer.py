"""Interactive HTML 3D viewer for an exported placement."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import plotly.graph_objects as go

logger = logging.getLogger(__name__)

# Triangle indices of a cuboid's 12 faces over its 8 vertices
_MESH_I = [0, 2, 4, 6, 0, 5, 3, 6, 0, 7, 1, 6]
_MESH_J = [1, 3, 5, 7, 1, 4, 2, 7, 3, 4, 2, 5]
_MESH_K = [2, 0, 6, 4, 5, 0, 6, 3, 7, 0, 6, 1]


def _cuboid_vertices(x: float, y: float, z: float, L: float, W: float, H: float) -> list[tuple[float, float, float]]:
    return [
        (x, y, z),
        (x + L, y, z),
        (x + L, y + W, z),
        (x, y + W, z),
        (x, y, z + H),
        (x + L, y, z + H),
        (x + L, y + W, z + H),
        (x, y + W, z + H),
    ]


def _container_outline(L: float, W: float, H: float) -> go.Scatter3d:
    v = _cuboid_vertices(0, 0, 0, L, W, H)
    # Bottom ring, top ring, then the four verticals (None breaks the line)
    path = [0, 1, 2, 3, 0, 4, 5, 6, 7, 4, None, 1, 5, None, 2, 6, None, 3, 7]
    xs, ys, zs = [], [], []
    for idx in path:
        if idx is None:
            xs.append(None)
            ys.append(None)
            zs.append(None)
        else:
            xs.append(v[idx][0])
            ys.append(v[idx][1])
            zs.append(v[idx][2])
    return go.Scatter3d(
        x=xs, y=ys, z=zs, mode="lines", line=dict(color="black", width=3), name="container", showlegend=False
    )


def build_figure(data: dict[str, Any]) -> go.Figure:
    """Build a plotly figure from the payload produced by export.build_visualization."""
    container = data["container"]
    L, W, H = container["length"], container["width"], container["height"]

    traces: list[Any] = [_container_outline(L, W, H)]
    for item in data["items"]:
        pos, dims = item["position"], item["dimensions"]
        vertices = _cuboid_vertices(
            pos["x"], pos["y"], pos["z"], dims["length"], dims["width"], dims["height"]
        )
        traces.append(
            go.Mesh3d(
                x=[vertex[0] for vertex in vertices],
                y=[vertex[1] for vertex in vertices],
                z=[vertex[2] for vertex in vertices],
                i=_MESH_I,
                j=_MESH_J,
                k=_MESH_K,
                color=item["color"],
                opacity=0.85,
                flatshading=True,
                name=f"item {item['id']}",
                hovertext=f"#{item['id']} {dims['length']}x{dims['width']}x{dims['height']} "
                f"@ ({pos['x']}, {pos['y']}, {pos['z']})",
                showlegend=True,
            )
        )

    stats = data.get("stats", {})
    title = (
        f"Container {L}x{W}x{H} | items: {stats.get('totalItems', len(data['items']))} | "
        f"utilization: {stats.get('utilizationRate', 0.0):.2f}%"
    )
    longest = max(L, W, H) or 1

    fig = go.Figure(data=traces)
    fig.update_layout(
        title_text=title,
        scene=dict(
            xaxis=dict(range=[0, L], title="length"),
            yaxis=dict(range=[0, W], title="width"),
            zaxis=dict(range=[0, H], title="height"),
            aspectratio=dict(x=L / longest, y=W / longest, z=H / longest),
        ),
        margin=dict(l=0, r=0, b=0, t=40),
    )
    return fig


def write_viewer(data: dict[str, Any], path: str | Path = "bin_packing_viewer.html") -> Path:
    """Write a standalone HTML viewer (plotly.js loaded from its CDN)."""
    output_path = Path(path).resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    build_figure(data).write_html(str(output_path), include_plotlyjs="cdn")
    logger.info(f"HTML viewer written to {output_path}")
    return output_path
