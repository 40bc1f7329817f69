"""
Form field sets.

A field set is an ordered mapping of field name to FieldSpec produced by a
builder function. Variants are derived by decorating a builder rather than by
subclassing it: ``without_fields`` builds the base set and removes names.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from functools import wraps
from typing import Literal

from blogger.domain.text import SLUG_PATTERN

Widget = Literal["text", "textarea", "checkbox"]


@dataclass(frozen=True)
class FieldSpec:
    """Definition of a single form field."""

    name: str
    label: str
    widget: Widget = "text"
    required: bool = True
    max_length: int | None = None
    pattern: str | None = None


FieldSet = dict[str, FieldSpec]
FieldBuilder = Callable[[], FieldSet]


def build_post_fields() -> FieldSet:
    """Fields of the generic post form."""
    specs = [
        FieldSpec("title", "Title", max_length=255),
        # Left blank, the slug is derived from the title on save
        FieldSpec(
            "slug",
            "Slug",
            required=False,
            max_length=255,
            pattern=rf"^(?:{SLUG_PATTERN})?$",
        ),
        FieldSpec("author", "Author", max_length=255),
        FieldSpec("content", "Content", widget="textarea"),
        FieldSpec("published", "Published", widget="checkbox", required=False),
    ]
    return {spec.name: spec for spec in specs}


def without_fields(builder: FieldBuilder, *names: str) -> FieldBuilder:
    """Decorate a builder so the named fields are removed from what it builds."""

    @wraps(builder)
    def build() -> FieldSet:
        fields = builder()
        for name in names:
            fields.pop(name, None)
        return fields

    return build


# Used when the author comes from the authenticated identity, not from input
build_signed_post_fields = without_fields(build_post_fields, "author")
