"""
Form view models handed to templates.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .fields import Widget


@dataclass(frozen=True)
class FieldView:
    name: str
    label: str
    widget: Widget
    value: Any
    required: bool
    errors: tuple[str, ...] = ()


@dataclass(frozen=True)
class FormView:
    """Read-only snapshot of a form for rendering."""

    name: str
    fields: tuple[FieldView, ...] = field(default_factory=tuple)
    submitted: bool = False
    valid: bool = False

    def __getitem__(self, name: str) -> FieldView:
        for field_view in self.fields:
            if field_view.name == name:
                return field_view
        raise KeyError(name)

    def __contains__(self, name: object) -> bool:
        return any(f.name == name for f in self.fields)

    @property
    def errors(self) -> dict[str, tuple[str, ...]]:
        return {f.name: f.errors for f in self.fields if f.errors}
