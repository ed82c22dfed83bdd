from threading import Lock
from typing import Iterable, List

from .candle_store import CandleStore, StoreSealedError
from ..models.market import CandleRecord


class InMemoryCandleStore(CandleStore):
    """Per-request accumulator shared by the series fetch workers.

    Every write holds the lock for the whole append, so readers never see a
    partially added batch. Once sealed the store only serves reads.
    """

    def __init__(self) -> None:
        self._storage: List[CandleRecord] = []
        self._lock = Lock()
        self._sealed = False

    def add(self, record: CandleRecord) -> None:
        with self._lock:
            if self._sealed:
                raise StoreSealedError(f"store sealed, rejecting record for {record.symbol}")
            self._storage.append(record)

    def add_many(self, records: Iterable[CandleRecord]) -> None:
        batch = list(records)
        with self._lock:
            if self._sealed:
                raise StoreSealedError(f"store sealed, rejecting {len(batch)} records")
            self._storage.extend(batch)

    def seal(self) -> None:
        with self._lock:
            self._sealed = True

    @property
    def sealed(self) -> bool:
        with self._lock:
            return self._sealed

    def list_all(self) -> List[CandleRecord]:
        with self._lock:
            return list(self._storage)

    def __len__(self) -> int:
        with self._lock:
            return len(self._storage)
