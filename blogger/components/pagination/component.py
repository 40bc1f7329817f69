"""
Pagination component - page-bounded views over a PageSourcePort.

Page numbering starts at 1. A listing with no items still has one (empty) page.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Generic, TypeVar

from blogger.domain.errors import BloggerError

from .ports import PageSourcePort

T = TypeVar("T")


class OutOfRangePageError(BloggerError, ValueError):
    """Requested page does not exist and normalization was not requested."""

    def __init__(self, page: int, nb_pages: int) -> None:
        super().__init__(f"Page {page} is out of range (1..{nb_pages})")
        self.page = page
        self.nb_pages = nb_pages


class Paginator(Generic[T]):
    def __init__(self, source: PageSourcePort[T], max_per_page: int = 10) -> None:
        if max_per_page < 1:
            raise ValueError("max_per_page must be at least 1")
        self._source = source
        self.max_per_page = max_per_page
        self.current_page = 1
        self._nb_results: int | None = None
        self._results: Sequence[T] | None = None

    @property
    def nb_results(self) -> int:
        if self._nb_results is None:
            self._nb_results = self._source.count()
        return self._nb_results

    @property
    def nb_pages(self) -> int:
        return max(1, -(-self.nb_results // self.max_per_page))

    def set_current_page(
        self,
        page: int,
        allow_out_of_range: bool = False,
        normalize_out_of_range: bool = False,
    ) -> None:
        """
        Move to ``page``.

        With ``normalize_out_of_range`` pages outside ``1..nb_pages`` are
        clamped to the nearest bound. Otherwise they raise OutOfRangePageError
        unless ``allow_out_of_range`` is set, in which case the page is kept
        and simply has no results.
        """
        page = int(page)
        if page < 1 or page > self.nb_pages:
            if normalize_out_of_range:
                page = min(max(page, 1), self.nb_pages)
            elif not allow_out_of_range:
                raise OutOfRangePageError(page, self.nb_pages)

        self.current_page = page
        self._results = None

    def get_current_page_results(self) -> Sequence[T]:
        if self._results is None:
            if self.current_page < 1:
                self._results = []
            else:
                offset = (self.current_page - 1) * self.max_per_page
                self._results = self._source.slice(offset, self.max_per_page)
        return self._results

    @property
    def has_previous_page(self) -> bool:
        return self.current_page > 1

    @property
    def has_next_page(self) -> bool:
        return self.current_page < self.nb_pages

    @property
    def previous_page(self) -> int:
        return max(1, self.current_page - 1)

    @property
    def next_page(self) -> int:
        return min(self.nb_pages, self.current_page + 1)

    def have_to_paginate(self) -> bool:
        return self.nb_results > self.max_per_page
