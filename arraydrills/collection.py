"""A minimal growable vector and the collection interface it implements."""

from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")

_log = logging.getLogger(__name__)

_INITIAL_CAPACITY = 2


class VectorError(Exception):
    """Raised when a vector operation cannot be carried out."""

    def __init__(self, message: str = "Vector Error") -> None:
        super().__init__(message)


class Collectable(ABC, Generic[T]):
    """A container that elements can be added to and removed from."""

    @abstractmethod
    def add(self, element: T) -> None:
        """Store ``element`` in the collection."""

    @abstractmethod
    def remove(self, identifier: T) -> None:
        """Remove the element matching ``identifier``."""


class NaiveVector(Collectable[T]):
    """A vector whose capacity starts at two and doubles whenever it fills up."""

    def __init__(self) -> None:
        self._items: list[T] = []
        self._capacity = 0

    def __len__(self) -> int:
        return len(self._items)

    @property
    def capacity(self) -> int:
        """Number of slots reserved, filled or not."""
        return self._capacity

    def add(self, element: T) -> None:
        """Append ``element``, doubling the capacity first if the vector is full."""
        if len(self._items) == self._capacity:
            self._capacity = _INITIAL_CAPACITY if self._capacity == 0 else self._capacity * 2
        self._items.append(element)
        _log.debug("Added element. New Len: %d, Cap: %d", len(self._items), self._capacity)

    def remove(self, identifier: T) -> None:
        """Accept a removal request; the vector keeps its elements unchanged."""
        _log.debug("Remove requested for %r; contents left unchanged", identifier)


def main(argv: list[str] | None = None) -> int:
    """Print the greeting and exit successfully."""
    del argv
    sys.stdout.write("Hello, world!\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())