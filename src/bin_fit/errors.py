"""Exceptions raised by the packing facade for inputs it refuses to search."""

from __future__ import annotations


class PackingError(Exception):
    """Base class for bin-fit errors."""


class InvalidDimension(PackingError, ValueError):
    """A container or item edge is negative."""

    def __init__(self, owner: str, name: str, value: int):
        self.owner = owner
        self.name = name
        self.value = value
        super().__init__(f"{owner} {name} cannot be negative, got {value!r}")


class InvalidQuantity(PackingError, ValueError):
    """An item quantity is negative."""

    def __init__(self, index: int, value: int):
        self.index = index
        self.value = value
        super().__init__(f"item {index} quantity cannot be negative, got {value!r}")


class UnknownOrderingPolicy(PackingError, KeyError):
    """The requested ordering policy name is not registered."""

    def __init__(self, name: str, valid: list[str]):
        self.name = name
        self.valid = valid
        super().__init__(f"Unknown ordering policy '{name}'. Valid: {valid}")

    def __str__(self) -> str:
        return str(self.args[0])
