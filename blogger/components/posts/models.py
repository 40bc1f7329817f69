"""
Post controller input/output models.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

SUBMIT_METHODS = frozenset({"POST", "PUT", "PATCH"})


# --- Input Models ---


@dataclass(frozen=True)
class FormSubmission:
    """Request method plus raw form payload."""

    method: str = "GET"
    data: Mapping[str, Any] = field(default_factory=dict)

    def is_submitted(self) -> bool:
        return self.method.upper() in SUBMIT_METHODS


# --- Output Models ---


@dataclass(frozen=True)
class Redirect:
    """Instruction to redirect the client."""

    url: str


@dataclass(frozen=True)
class Render:
    """Instruction to render a template with a context."""

    template: str
    context: dict[str, Any] = field(default_factory=dict)


ActionResult = Redirect | Render
