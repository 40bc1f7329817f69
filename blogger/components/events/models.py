"""
Post lifecycle event models.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from blogger.domain.entities import Post


class PostEventKind(str, Enum):
    """Lifecycle event kinds, valued by their dispatch name."""

    CREATED = "blogger.post.create"
    UPDATED = "blogger.post.update"
    DELETED = "blogger.post.delete"
    PUBLISHED = "blogger.post.publish"
    UNPUBLISHED = "blogger.post.unpublish"


@dataclass(frozen=True)
class PostEvent:
    """Immutable notification carrying the affected post."""

    kind: PostEventKind
    post: Post


PostListener = Callable[[PostEvent], object]
