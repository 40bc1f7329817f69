"""
Post controller port definitions.

Each collaborator of the controller is a narrow capability interface; the
application wires concrete adapters in ``blogger.api.deps``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from blogger.components.events import PostEvent, PostEventKind
from blogger.components.forms import FormView
from blogger.components.sorting import PostSorter
from blogger.domain.entities import Post


class PaginatorPort(Protocol):
    """Page-bounded view over posts."""

    current_page: int

    @property
    def nb_pages(self) -> int: ...

    @property
    def nb_results(self) -> int: ...

    def set_current_page(
        self,
        page: int,
        allow_out_of_range: bool = False,
        normalize_out_of_range: bool = False,
    ) -> None:
        """Move to a page, optionally clamping out-of-range pages."""
        ...

    def get_current_page_results(self) -> Sequence[Post]:
        """Posts on the current page, in listing order."""
        ...


class PostStorePort(Protocol):
    """Read side of post persistence."""

    def create_post(self) -> Post:
        """Return a fresh, unsaved post."""
        ...

    def find_post(self, post_id: int) -> Post | None:
        """Get a post by ID."""
        ...

    def create_paginator(self, sorter: PostSorter) -> PaginatorPort:
        """Paginator over all posts ordered by ``sorter``."""
        ...


class PostManipulatorPort(Protocol):
    """Write side of post persistence."""

    def create(self, post: Post) -> None: ...

    def update(self, post: Post) -> None: ...

    def delete(self, post: Post) -> None: ...

    def publish(self, post: Post) -> None: ...

    def unpublish(self, post: Post) -> None: ...


class EventDispatcherPort(Protocol):
    def dispatch(self, kind: PostEventKind, post: Post) -> PostEvent:
        """Notify listeners synchronously. Listener results are ignored."""
        ...


class FormPort(Protocol):
    fields: Mapping[str, Any]

    def bind(self, raw: Mapping[str, Any]) -> None: ...

    def is_valid(self) -> bool: ...

    def create_view(self) -> FormView: ...


class FormFactoryPort(Protocol):
    def create(self, name: str, target: Any) -> FormPort:
        """Build the named form over ``target``."""
        ...


class RouterPort(Protocol):
    def generate(self, name: str, **params: Any) -> str:
        """URL of the named route."""
        ...
