"""
Error taxonomy for the blogger backend.

Validation failures are not exceptions: forms carry their own errors and the
controller re-renders them. Persistence errors are not wrapped and propagate
as raised by the adapter.
"""

from __future__ import annotations

from typing import Any


class BloggerError(Exception):
    """Base class for errors raised by the blogger package."""


class PostNotFoundError(BloggerError, LookupError):
    """No post exists for the requested identifier."""

    def __init__(self, post_id: Any) -> None:
        super().__init__(f"Post {post_id} not found")
        self.post_id = post_id


class UnknownFormTypeError(BloggerError, KeyError):
    """The form factory has no builder registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown form type: {self.name}"


class ConfigError(BloggerError, ValueError):
    """The configuration file is missing or does not validate."""
