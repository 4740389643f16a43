from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from bin_fit.geometry import Orientation, Position


class Container(BaseModel):
    """Container model with integer dimensions."""

    model_config = ConfigDict(frozen=True)

    length: int = Field(description="Length of the container")
    width: int = Field(description="Width of the container")
    height: int = Field(description="Height of the container")

    @property
    def dimensions(self) -> tuple[int, int, int]:
        return self.length, self.width, self.height


class Item(BaseModel):
    """Item model with dimensions and the number of identical copies requested."""

    model_config = ConfigDict(frozen=True)

    length: int = Field(description="Length of the item")
    width: int = Field(description="Width of the item")
    height: int = Field(description="Height of the item")
    quantity: int = Field(default=1, description="Number of identical items")

    @property
    def dimensions(self) -> tuple[int, int, int]:
        return self.length, self.width, self.height


class PlacementRecord(BaseModel):
    """One entry of the witness: which unit item went where, and how it was turned."""

    model_config = ConfigDict(frozen=True)

    item_index: int = Field(ge=0, description="Index of the unit item in search order")
    position: Position = Field(description="Minimum corner (x, y, z) of the placed item")
    orientation: Orientation = Field(description="Oriented dimensions (L, W, H) of the placed item")


class PackingResult(BaseModel):
    """Standard result returned by the packing facade."""

    fits: bool
    placements: list[PlacementRecord] = Field(default_factory=list)
    unit_items: int = 0
    used_volume: int = 0
    container_volume: int = 0
    utilization: float = 0.0
    elapsed_seconds: float = 0.0
