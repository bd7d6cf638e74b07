"""Shop configuration using Pydantic."""
import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

ROAD_PARTS = [
    ["chain", "11-speed"],
    ["tire_size", "23"],
    ["tape_color", "red"],
]

MOUNTAIN_PARTS = [
    ["chain", "11-speed"],
    ["tire_size", "2.1"],
    ["front_shock", "Manitou"],
    ["rear_shock", "Fox", False],
]


class ShopConfig(BaseModel):
    """Settings for the demo run.

    Part rows are kept as raw lists; PartsFactory does the row validation.
    """

    log_level: str = Field("INFO", description="Logging level for the bikeshop logger")
    bike_size: str = Field("L", description="Frame size used for the demo bikes")
    road_parts: List[List[Any]] = Field(default_factory=lambda: [list(row) for row in ROAD_PARTS])
    mountain_parts: List[List[Any]] = Field(default_factory=lambda: [list(row) for row in MOUNTAIN_PARTS])

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("bike_size")
    @classmethod
    def validate_bike_size(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Bike size must not be empty")
        return v


def load_config(overrides: Optional[Dict[str, Any]] = None) -> ShopConfig:
    return ShopConfig(**(overrides or {}))
