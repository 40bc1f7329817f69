"""
Forms component - field sets, field suppression and request binding.
"""

from .component import DEFAULT_FORM_TYPES, Form, FormFactory
from .fields import (
    FieldBuilder,
    FieldSet,
    FieldSpec,
    build_post_fields,
    build_signed_post_fields,
    without_fields,
)
from .models import FieldView, FormView

__all__ = [
    # Form binding
    "DEFAULT_FORM_TYPES",
    "Form",
    "FormFactory",
    # Field sets
    "FieldBuilder",
    "FieldSet",
    "FieldSpec",
    "build_post_fields",
    "build_signed_post_fields",
    "without_fields",
    # Views
    "FieldView",
    "FormView",
]
