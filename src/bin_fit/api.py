"""FastAPI endpoint for bin-fit."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.concurrency import run_in_threadpool

from bin_fit.config import PackOptions
from bin_fit.errors import PackingError
from bin_fit.io.schemas import PackOptionsSchema, PackRequestSchema
from bin_fit.models import PackingResult
from bin_fit.packer import pack

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Bin Fit API",
    description="Checks whether a set of boxes fits into a single container",
)


def format_output(result: PackingResult) -> dict[str, Any]:
    """Flatten a PackingResult into JSON primitives."""
    return {
        "fits": result.fits,
        "placements": [
            {
                "item_index": r.item_index,
                "position": {"x": r.position.x, "y": r.position.y, "z": r.position.z},
                "orientation": {
                    "length": r.orientation.length,
                    "width": r.orientation.width,
                    "height": r.orientation.height,
                },
            }
            for r in result.placements
        ],
        "metrics": {
            "unit_items": result.unit_items,
            "used_volume": result.used_volume,
            "container_volume": result.container_volume,
            "utilization": result.utilization,
        },
        "elapsed_seconds": result.elapsed_seconds,
    }


@app.post("/pack")
async def pack_endpoint(request: PackRequestSchema) -> dict[str, Any]:
    """
    Check whether the items fit and return the witness placement.

    Input (request body):
        {
            "container": {"length": 600, "width": 400, "height": 400},
            "items": [{"length": 380, "width": 320, "height": 100, "quantity": 2}],
            "options": {"warning_budget": 3.0, "ordering": "volume"}
        }
    """
    request_options = request.options or PackOptionsSchema()
    options = PackOptions(**request_options.model_dump())
    try:
        # The search is CPU bound and synchronous
        result = await run_in_threadpool(pack, request.container, request.items, options)
    except PackingError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"ERROR in /pack endpoint: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    logger.info(f"fits={result.fits}, unit_items={result.unit_items}, elapsed={result.elapsed_seconds:.3f}s")
    return format_output(result)


@app.get("/health")
async def health() -> dict[str, Any]:
    """Health check endpoint."""
    return {"ok": True}
