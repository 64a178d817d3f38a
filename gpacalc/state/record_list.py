from __future__ import annotations

from dataclasses import replace
from typing import Iterator

from gpacalc.domain.models.entities import Record

FIELDS = ("units", "grade")
MAX_COUNT = 100


class RecordListError(Exception):
    pass


class RecordList:
    """Ordered course rows; a row's position is its edit/delete key."""

    def __init__(self) -> None:
        self._records: list[Record] = [Record()]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __getitem__(self, index: int) -> Record:
        return self._records[index]

    def set_count(self, count: int) -> None:
        if isinstance(count, bool) or not isinstance(count, int) or not 0 < count <= MAX_COUNT:
            raise RecordListError(f"Course count must be a whole number from 1 to {MAX_COUNT}, got {count!r}")
        self._records = [Record() for _ in range(count)]

    def append(self) -> None:
        self._records.append(Record())

    def update(self, index: int, field: str, value: str) -> None:
        if field not in FIELDS:
            raise RecordListError(f"Unknown course field: {field}")
        self._check_index(index)
        setattr(self._records[index], field, value)

    def remove(self, index: int) -> None:
        self._check_index(index)
        del self._records[index]

    def is_complete(self) -> bool:
        return all(r.is_filled for r in self._records)

    def snapshot(self) -> tuple[Record, ...]:
        return tuple(replace(r) for r in self._records)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._records):
            raise IndexError(f"Course index {index} out of range (0..{len(self._records) - 1})")
