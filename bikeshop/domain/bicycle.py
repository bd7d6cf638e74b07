from dataclasses import dataclass
from typing import Sequence

from bikeshop.domain.part import Part
from bikeshop.domain.parts import SparesProvider


@dataclass(frozen=True)
class Bicycle:
    size: str
    parts: SparesProvider

    def spares(self) -> Sequence[Part]:
        return self.parts.spares()
