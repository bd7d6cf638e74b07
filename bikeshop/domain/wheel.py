"""Wheel records built from raw (rim, tire) rows.

Callers hand over bare nested lists; everything past the constructor works
with named ``Wheel`` attributes instead of row indexes.
"""
from dataclasses import dataclass
from typing import List, Sequence

from bikeshop.exceptions import WheelDataError


@dataclass(frozen=True)
class Wheel:
    rim: float
    tire: float


class RevealingReferences:
    def __init__(self, data: Sequence[Sequence[float]]):
        self._wheels = self.wheelify(data)

    @property
    def wheels(self) -> List[Wheel]:
        return list(self._wheels)

    def diameters(self) -> List[float]:
        return [self.diameter(wheel) for wheel in self._wheels]

    @staticmethod
    def diameter(wheel: Wheel) -> float:
        return wheel.rim + (wheel.tire * 2)

    @staticmethod
    def wheelify(data: Sequence[Sequence[float]]) -> List[Wheel]:
        wheels = []
        for i, cell in enumerate(data):
            if isinstance(cell, (str, bytes)) or len(cell) != 2:
                raise WheelDataError(i, cell)
            wheels.append(Wheel(cell[0], cell[1]))
        return wheels
