"""
Forms component - binds raw request input onto a target object.

Validation is delegated to a pydantic model generated from the field set.
The target is only written when the whole submission validates, so an
invalid submission leaves it untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import lru_cache
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, StringConstraints, ValidationError, create_model

from blogger.domain.errors import UnknownFormTypeError

from .fields import FieldBuilder, FieldSet, FieldSpec, build_post_fields, build_signed_post_fields
from .models import FieldView, FormView

logger = logging.getLogger(__name__)

DEFAULT_FORM_TYPES: dict[str, FieldBuilder] = {
    "blogger_post": build_post_fields,
    "blogger_signed_post": build_signed_post_fields,
}

# Friendlier messages for the pydantic error types a post form can produce
ERROR_MESSAGES = {
    "string_too_short": "This value should not be blank.",
    "string_pattern_mismatch": "Only lowercase letters, numbers, and hyphens are allowed.",
}

_FALSE_VALUES = {"", "0", "false", "off", "no"}


def _field_definition(spec: FieldSpec) -> tuple[Any, Any]:
    if spec.widget == "checkbox":
        return (bool, False)

    constraints = StringConstraints(
        strip_whitespace=True,
        min_length=1 if spec.required else None,
        max_length=spec.max_length,
        pattern=spec.pattern,
    )
    return (Annotated[str, constraints], ...)


@lru_cache(maxsize=32)
def _schema_for(name: str, specs: tuple[FieldSpec, ...]) -> type[BaseModel]:
    definitions: dict[str, Any] = {spec.name: _field_definition(spec) for spec in specs}
    return create_model(  # type: ignore[call-overload, no-any-return]
        f"{name}_schema",
        __config__=ConfigDict(extra="ignore"),
        **definitions,
    )


class Form:
    """A field set bound to one target object."""

    def __init__(self, name: str, fields: FieldSet, target: Any) -> None:
        self.name = name
        self.fields = fields
        self.target = target
        self._schema = _schema_for(name, tuple(fields.values()))
        self._submitted = False
        self._errors: dict[str, list[str]] = {}
        self._data: dict[str, Any] = {
            field_name: getattr(target, field_name, None) for field_name in fields
        }

    def _read(self, raw: Mapping[str, Any], spec: FieldSpec) -> Any:
        value = raw.get(spec.name)
        if spec.widget == "checkbox":
            # Unchecked HTML checkboxes are simply absent from the payload
            return value is not None and str(value).strip().lower() not in _FALSE_VALUES
        return "" if value is None else str(value)

    def bind(self, raw: Mapping[str, Any]) -> None:
        """Validate ``raw`` and, when valid, copy the values onto the target."""
        self._submitted = True
        self._errors = {}
        self._data = {name: self._read(raw, spec) for name, spec in self.fields.items()}

        try:
            validated = self._schema.model_validate(self._data)
        except ValidationError as e:
            for error in e.errors():
                field_name = str(error["loc"][0]) if error["loc"] else "__all__"
                message = ERROR_MESSAGES.get(error["type"], error["msg"])
                self._errors.setdefault(field_name, []).append(message)
            logger.debug("Form %s rejected: %s", self.name, self._errors)
            return

        for field_name, value in validated.model_dump().items():
            setattr(self.target, field_name, value)
            self._data[field_name] = value

    def is_submitted(self) -> bool:
        return self._submitted

    def is_valid(self) -> bool:
        return self._submitted and not self._errors

    @property
    def errors(self) -> dict[str, list[str]]:
        return {name: list(messages) for name, messages in self._errors.items()}

    def create_view(self) -> FormView:
        return FormView(
            name=self.name,
            fields=tuple(
                FieldView(
                    name=spec.name,
                    label=spec.label,
                    widget=spec.widget,
                    value=self._data.get(spec.name),
                    required=spec.required,
                    errors=tuple(self._errors.get(spec.name, [])),
                )
                for spec in self.fields.values()
            ),
            submitted=self._submitted,
            valid=self.is_valid(),
        )


class FormFactory:
    """Creates forms from registered field set builders."""

    def __init__(self, builders: Mapping[str, FieldBuilder] | None = None) -> None:
        self._builders: dict[str, FieldBuilder] = dict(
            DEFAULT_FORM_TYPES if builders is None else builders
        )

    def register(self, name: str, builder: FieldBuilder) -> None:
        self._builders[name] = builder

    def has(self, name: str) -> bool:
        return name in self._builders

    def create(self, name: str, target: Any) -> Form:
        builder = self._builders.get(name)
        if builder is None:
            raise UnknownFormTypeError(name)
        return Form(name, builder(), target)
