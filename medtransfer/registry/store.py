from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Generic, Iterable, List, Optional, TypeVar

from pydantic import BaseModel

R = TypeVar("R", bound=BaseModel)


class RecordStore(ABC, Generic[R]):
    """Records keyed by `id`. Saving an existing id replaces the whole record."""

    @abstractmethod
    def save(self, record: R) -> R: ...
    @abstractmethod
    def get(self, record_id: str) -> Optional[R]: ...
    @abstractmethod
    def delete(self, record_id: str) -> bool: ...
    @abstractmethod
    def all(self) -> List[R]: ...

    def save_many(self, records: Iterable[R]) -> int:
        n = 0
        for record in records:
            self.save(record)
            n += 1
        return n


class InMemoryStore(RecordStore[R]):
    def __init__(self, records: Iterable[R] = ()) -> None:
        self._records: Dict[str, R] = {}
        self.save_many(records)

    def save(self, record: R) -> R:
        self._records[record.id] = record  # dict keeps first-insert order on replace
        return record

    def get(self, record_id: str) -> Optional[R]:
        return self._records.get(record_id)

    def delete(self, record_id: str) -> bool:
        return self._records.pop(record_id, None) is not None

    def all(self) -> List[R]:
        return list(self._records.values())

    def __len__(self) -> int:
        return len(self._records)
