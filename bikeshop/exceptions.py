"""Exceptions raised by the bikeshop domain."""
from typing import Any


class BikeShopError(Exception):
    """Base class for bikeshop errors."""


class PartConfigError(BikeShopError, ValueError):
    """A parts configuration entry could not be turned into a Part."""

    def __init__(self, position: int, entry: Any, reason: str):
        self.position = position
        self.entry = entry
        self.reason = reason
        super().__init__(f"Invalid part config at position {position}: {entry!r} ({reason})")


class WheelDataError(BikeShopError, ValueError):
    """A wheel row is not a (rim, tire) pair."""

    def __init__(self, position: int, row: Any):
        self.position = position
        self.row = row
        super().__init__(f"Invalid wheel data at position {position}: {row!r} (expected rim and tire)")


class InvalidGearError(BikeShopError, ValueError):
    pass
