"""Bicycle shop domain objects: parts, bikes and the factory that builds them."""
from bikeshop.domain import Bicycle, Part, PartsCollection
from bikeshop.exceptions import BikeShopError, PartConfigError
from bikeshop.parts_factory import PartsFactory

__version__ = "0.1.0"

__all__ = [
    "Bicycle",
    "BikeShopError",
    "Part",
    "PartConfigError",
    "PartsCollection",
    "PartsFactory",
]
