"""Packing options; defaults can be overridden from the environment (.env supported)."""

from __future__ import annotations

import logging
import os
from typing import Callable, Union

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

from bin_fit.models import Item

logger = logging.getLogger(__name__)

DEFAULT_WARNING_BUDGET = 3.0
DEFAULT_ORDERING = "volume"

ENV_WARNING_BUDGET = "BIN_FIT_WARNING_BUDGET"
ENV_ORDERING = "BIN_FIT_ORDERING"

OrderingPolicy = Callable[[list[Item]], list[Item]]


class PackOptions(BaseModel):
    """Options for one packing run."""

    warning_budget: float = Field(
        default=DEFAULT_WARNING_BUDGET,
        ge=0,
        description="Seconds after which the search starts trading completeness for speed",
    )
    ordering: Union[str, OrderingPolicy] = Field(
        default=DEFAULT_ORDERING,
        description="Ordering policy name or callable(unit_items) -> reordered unit_items",
    )

    # Time-boxing thresholds, as fractions / multiples of warning_budget
    restrict_fraction: float = Field(default=0.5, ge=0)
    restrict_multiple: float = Field(default=1.0, ge=0)
    abort_multiple: float = Field(default=2.0, ge=0)
    near_timeout_orientations: int = Field(default=2, ge=1)
    near_timeout_positions: int = Field(default=3, ge=1)


def load_options_from_env(**overrides) -> PackOptions:
    """
    Build PackOptions from BIN_FIT_* environment variables.

    A .env file in the working directory (or a parent) is loaded when present;
    it never overrides variables that are already set. Keyword overrides win
    over the environment.
    """
    load_dotenv(find_dotenv(usecwd=True))

    values: dict = {}
    budget = os.getenv(ENV_WARNING_BUDGET)
    if budget:
        values["warning_budget"] = float(budget)
    ordering = os.getenv(ENV_ORDERING)
    if ordering:
        values["ordering"] = ordering.strip()

    values.update({k: v for k, v in overrides.items() if v is not None})
    logger.debug(f"Packing options from environment: {values}")
    return PackOptions(**values)
