import logging
from typing import Any, Callable, Iterable, List, Mapping, Sequence

from bikeshop.domain.part import Part
from bikeshop.domain.parts import PartsCollection
from bikeshop.exceptions import PartConfigError

logger = logging.getLogger(__name__)

# (name, description) or (name, description, needs_spare)
PartConfig = Sequence[Any]


class PartsFactory:
    """Builds parts collections from configuration rows."""

    @classmethod
    def build(
        cls,
        config: Iterable[PartConfig],
        parts_class: Callable[[List[Part]], Any] = PartsCollection,
    ) -> Any:
        parts = [cls.create_part(entry, i) for i, entry in enumerate(config)]
        logger.debug("Built %d parts into %s", len(parts), getattr(parts_class, "__name__", parts_class))
        return parts_class(parts)

    @classmethod
    def create_part(cls, entry: PartConfig, position: int = 0) -> Part:
        if isinstance(entry, (str, bytes, Mapping)) or not isinstance(entry, Sequence):
            cls._reject(position, entry, "expected a sequence of 2 or 3 fields")
        if len(entry) not in (2, 3):
            cls._reject(position, entry, f"expected 2 or 3 fields, got {len(entry)}")

        name, description = entry[0], entry[1]
        if not isinstance(name, str) or not isinstance(description, str):
            cls._reject(position, entry, "name and description must be strings")

        needs_spare = entry[2] if len(entry) == 3 else True
        if not isinstance(needs_spare, bool):
            cls._reject(position, entry, "needs_spare must be a bool")

        return Part(name=name, description=description, needs_spare=needs_spare)

    @staticmethod
    def _reject(position: int, entry: Any, reason: str) -> None:
        logger.warning("Rejecting part config at position %d: %s", position, reason)
        raise PartConfigError(position, entry, reason)
