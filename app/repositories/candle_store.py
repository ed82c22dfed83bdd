from abc import ABC, abstractmethod
from typing import Iterable, List

from ..models.market import CandleRecord


class StoreSealedError(RuntimeError):
    """Raised when a write reaches a store whose contents were handed off."""


class CandleStore(ABC):
    @abstractmethod
    def add(self, record: CandleRecord) -> None:
        ...

    @abstractmethod
    def add_many(self, records: Iterable[CandleRecord]) -> None:
        ...

    @abstractmethod
    def seal(self) -> None:
        ...

    @abstractmethod
    def list_all(self) -> List[CandleRecord]:
        ...

    @abstractmethod
    def __len__(self) -> int:
        ...
