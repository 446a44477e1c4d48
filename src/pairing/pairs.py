from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, Tuple, final

from .common import Bidirectional, T, add_slots
from .compat import pairwise
from .wrapping import Wrapping

__all__ = ["Paired", "PairIterator", "paired", "paired_list"]


@final
class PairIterator(Iterator[Tuple[T, T]]):
    """Produces the pairs of a single pass over the source, one at a time.

    First and last elements are read once, when the iterator is created.
    Once exhausted, it stays exhausted.
    """

    __slots__ = ("_first", "_last", "_inner", "_lead_pending", "_tail_pending")

    def __init__(self, source: Bidirectional[T], wrapping: Wrapping) -> None:
        self._inner: Iterator[tuple[T, T]]
        # At least two elements are needed to form a single pair
        if len(source) > 1:
            self._first = next(iter(source))
            self._last = next(reversed(source))
            self._inner = pairwise(source)
            self._lead_pending = wrapping is Wrapping.LAST_FIRST
            self._tail_pending = wrapping is Wrapping.FIRST_LAST
        else:
            self._inner = iter(())
            self._lead_pending = self._tail_pending = False

    def __iter__(self) -> PairIterator[T]:
        return self

    def __next__(self) -> tuple[T, T]:
        if self._lead_pending:
            self._lead_pending = False
            return (self._last, self._first)
        pair = next(self._inner, None)
        if pair is not None:
            return pair
        if self._tail_pending:
            self._tail_pending = False
            return (self._last, self._first)
        raise StopIteration()


@final
@add_slots
@dataclass(frozen=True)
class Paired(Iterable[Tuple[T, T]], Generic[T]):
    """Lazy view of the consecutive pairs in a collection.

    Each call to :func:`iter` starts a fresh pass from the beginning,
    so the same instance may be iterated any number of times.
    The source is never modified, but it shouldn't be modified by others
    while a pass is in progress either.
    """

    source: Bidirectional[T]
    wrapping: Wrapping = Wrapping.NONE

    def __iter__(self) -> PairIterator[T]:
        return PairIterator(self.source, self.wrapping)

    def __len__(self) -> int:
        count = len(self.source)
        if count <= 1:
            return 0
        elif self.wrapping in (Wrapping.LAST_FIRST, Wrapping.FIRST_LAST):
            return count
        else:
            return count - 1

    def tolist(self) -> list[tuple[T, T]]:
        return list(self)


def paired(
    source: Bidirectional[T],
    wrapping: Wrapping | str | None = Wrapping.NONE,
) -> Paired[T]:
    """Pair up consecutive elements of a collection.

    Useful when you need to work with the current and next elements
    at the same time.

    Example
    -------
    >>> list(paired([1, 2, 3]))
    [(1, 2), (2, 3)]
    >>> list(paired([1, 2, 3], Wrapping.LAST_FIRST))
    [(3, 1), (1, 2), (2, 3)]
    >>> list(paired([1, 2, 3], "first_last"))
    [(1, 2), (2, 3), (3, 1)]

    Note
    ----
    * Collections with fewer than two elements yield no pairs at all,
      whatever the wrapping.
    * The synthetic pair is always ``(last, first)``, also when
      it is put at the start.
    """
    return Paired(source, Wrapping.parse(wrapping))


def paired_list(
    source: Bidirectional[T],
    wrapping: Wrapping | str | None = Wrapping.NONE,
) -> list[tuple[T, T]]:
    "Like :func:`paired`, but returns the pairs as a list"
    return paired(source, wrapping).tolist()
