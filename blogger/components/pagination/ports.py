"""
Pagination component port definitions.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, TypeVar

T_co = TypeVar("T_co", covariant=True)


class PageSourcePort(Protocol[T_co]):
    """Source of paginated items, typically a query."""

    def count(self) -> int:
        """Total number of items."""
        ...

    def slice(self, offset: int, length: int) -> Sequence[T_co]:
        """Items in ``[offset, offset + length)`` in listing order."""
        ...
