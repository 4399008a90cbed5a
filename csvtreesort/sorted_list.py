"""Sorted list that keeps CSV rows ordered by one column as they arrive."""

from __future__ import annotations

from bisect import bisect_left
from typing import Iterable, Iterator, Sequence


class SortedRowList:
    """Rows kept in ascending order of one column.

    A new row is placed before any existing rows with an equal key.
    """

    def __init__(self, column: int = 0) -> None:
        if column < 0:
            raise ValueError("column must not be negative")
        self.column = column
        self._keys: list[str] = []
        self._rows: list[list[str]] = []

    def add(self, row: Sequence[str]) -> None:
        """Insert a row at its sorted position."""
        row = list(row)
        key = row[self.column]
        position = bisect_left(self._keys, key)
        self._keys.insert(position, key)
        self._rows.insert(position, row)

    def extend(self, rows: Iterable[Sequence[str]]) -> None:
        """Insert every row from an iterable."""
        for row in rows:
            self.add(row)

    def __iter__(self) -> Iterator[list[str]]:
        return iter(self._rows)

    def __len__(self) -> int:
        return len(self._rows)