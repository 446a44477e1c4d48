from __future__ import annotations

from typing import Generic, Iterator, Sequence, TypeVar

T = TypeVar("T")


class Ring(Generic[T]):
    """Test helper: a bidirectional collection which isn't a Sequence,
    and which counts how often it is traversed."""

    def __init__(self, items: Sequence[T]) -> None:
        self._items = tuple(items)
        self.forward = 0
        self.backward = 0

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        self.forward += 1
        return iter(self._items)

    def __reversed__(self) -> Iterator[T]:
        self.backward += 1
        return reversed(self._items)
