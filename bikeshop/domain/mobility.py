import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class Mobility:
    def lumber(self) -> str:
        logger.info("lumbering")
        return "lumbering"

    def crabwalk(self) -> str:
        logger.info("crabwalking")
        return "crabwalking"


class Animal(ABC):
    """An animal that moves by delegating to its mobility, not by subclassing it."""

    def __init__(self, mobility: Mobility):
        self._mobility = mobility

    @property
    def mobility(self) -> Mobility:
        return self._mobility

    @abstractmethod
    def move(self) -> str: ...


class Bear(Animal):
    def move(self) -> str:
        return self.mobility.lumber()


class Crab(Animal):
    def move(self) -> str:
        return self.mobility.crabwalk()
