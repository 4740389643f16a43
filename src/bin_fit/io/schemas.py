"""Data schemas for input/output operations."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from bin_fit.config import DEFAULT_ORDERING, DEFAULT_WARNING_BUDGET
from bin_fit.models import Container, Item


class ContainerSchema(Container):
    """Schema for a container read from JSON."""

    length: int = Field(ge=0, description="Length of the container")
    width: int = Field(ge=0, description="Width of the container")
    height: int = Field(ge=0, description="Height of the container")


class ItemSchema(Item):
    """Schema for an item read from JSON."""

    length: int = Field(ge=0, description="Length of the item")
    width: int = Field(ge=0, description="Width of the item")
    height: int = Field(ge=0, description="Height of the item")
    quantity: int = Field(default=1, ge=0, description="Number of identical items")


class PackOptionsSchema(BaseModel):
    """Subset of PackOptions that can travel as JSON."""

    warning_budget: float = Field(default=DEFAULT_WARNING_BUDGET, ge=0, description="Seconds")
    ordering: str = Field(default=DEFAULT_ORDERING, description="volume, base_area or dimensions")


class PackRequestSchema(BaseModel):
    """Schema for a packing request."""

    container: ContainerSchema
    items: List[ItemSchema] = Field(default_factory=list)
    options: Optional[PackOptionsSchema] = None
