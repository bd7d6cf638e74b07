from dataclasses import dataclass

from bikeshop.exceptions import InvalidGearError


@dataclass(frozen=True)
class Gear:
    chainring: int
    cog: int

    def __post_init__(self):
        if self.cog == 0:
            raise InvalidGearError(f"Gear cog must be non-zero (chainring={self.chainring})")

    @property
    def ratio(self) -> float:
        return self.chainring / float(self.cog)
