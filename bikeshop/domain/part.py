from dataclasses import dataclass


@dataclass(frozen=True)
class Part:
    name: str
    description: str
    needs_spare: bool = True

    def __str__(self) -> str:
        return f"{self.name}: {self.description}"
