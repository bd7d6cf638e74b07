from typing import Iterable, Iterator, List, Protocol, Sequence

from bikeshop.domain.part import Part


class SparesProvider(Protocol):
    def spares(self) -> Sequence[Part]: ...


class PartsCollection:
    """Ordered collection of parts; a bike's type comes from what it holds."""

    def __init__(self, parts: Iterable[Part]):
        self._parts = tuple(parts)

    def __len__(self) -> int:
        return len(self._parts)

    def __iter__(self) -> Iterator[Part]:
        return iter(self._parts)

    def __repr__(self) -> str:
        return f"PartsCollection({list(self._parts)!r})"

    @property
    def size(self) -> int:
        return len(self._parts)

    def spares(self) -> List[Part]:
        return [part for part in self._parts if part.needs_spare]
