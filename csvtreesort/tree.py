"""Binary search tree that orders CSV rows by one column."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence


def stringify_row(row: Sequence[str]) -> str:
    """Join the fields of a row with commas and end it with a newline."""
    return ",".join(row) + "\n"


@dataclass(slots=True)
class _Node:
    row: list[str]
    left: Optional["_Node"] = field(default=None)
    right: Optional["_Node"] = field(default=None)


class BinaryTree:
    """Unbalanced binary search tree keyed on a single column of each row.

    Rows whose key equals a node's key go to the right, so an in-order walk
    keeps rows with equal keys in the order they were inserted.
    """

    def __init__(self, column: int = 0) -> None:
        if column < 0:
            raise ValueError("column must not be negative")
        self.column = column
        self._root: Optional[_Node] = None
        self._size = 0

    def insert(self, row: Sequence[str]) -> None:
        """Add a row to the tree."""
        row = list(row)
        if self._root is None:
            self._root = _Node(row)
            self._size = 1
            return

        key = row[self.column]
        node = self._root
        while True:
            if node.row[self.column] <= key:
                if node.right is None:
                    node.right = _Node(row)
                    break
                node = node.right
            else:
                if node.left is None:
                    node.left = _Node(row)
                    break
                node = node.left
        self._size += 1

    def rows(self, reverse: bool = False) -> Iterator[list[str]]:
        """Yield the rows in ascending order, or descending if ``reverse``."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.right if reverse else node.left
            node = stack.pop()
            yield node.row
            node = node.left if reverse else node.right

    def __iter__(self) -> Iterator[list[str]]:
        return self.rows()

    def __len__(self) -> int:
        return self._size