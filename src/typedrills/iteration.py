from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


def flatten(rows: Iterable[Iterable[T]]) -> Iterator[T]:
    """
    Yield every element of a 2D sequence in row-major order.

    Rows are exhausted one at a time, outer index first. Duplicates and
    order are preserved and nothing is skipped.
    """
    for row in rows:
        yield from row


class RowMajorIterator(Generic[T]):
    """Explicit iterator over a 2D sequence; same order as `flatten`."""

    def __init__(self, rows: Iterable[Iterable[T]]):
        self._rows = iter(rows)
        self._current: Iterator[T] = iter(())

    def __iter__(self) -> "RowMajorIterator[T]":
        return self

    def __next__(self) -> T:
        while True:
            try:
                return next(self._current)
            except StopIteration:
                # Raises StopIteration itself once the rows run out.
                self._current = iter(next(self._rows))


def print_flattened(rows: Iterable[Iterable[object]]) -> None:
    for value in flatten(rows):
        print(value)
