from bikeshop.domain.bicycle import Bicycle
from bikeshop.domain.customer import Customer
from bikeshop.domain.gear import Gear
from bikeshop.domain.mobility import Animal, Bear, Crab, Mobility
from bikeshop.domain.part import Part
from bikeshop.domain.parts import PartsCollection, SparesProvider
from bikeshop.domain.wheel import RevealingReferences, Wheel

__all__ = [
    "Animal",
    "Bear",
    "Bicycle",
    "Crab",
    "Customer",
    "Gear",
    "Mobility",
    "Part",
    "PartsCollection",
    "RevealingReferences",
    "SparesProvider",
    "Wheel",
]
