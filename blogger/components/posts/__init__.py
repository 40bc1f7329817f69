"""
Posts component - backend post lifecycle orchestration.
"""

from .component import (
    LIST_ROUTE,
    POST_FORM,
    SHOW_ROUTE,
    SIGNED_POST_FORM,
    PostController,
)
from .models import ActionResult, FormSubmission, Redirect, Render
from .ports import (
    EventDispatcherPort,
    FormFactoryPort,
    FormPort,
    PaginatorPort,
    PostManipulatorPort,
    PostStorePort,
    RouterPort,
)

__all__ = [
    # Controller
    "PostController",
    "LIST_ROUTE",
    "SHOW_ROUTE",
    "POST_FORM",
    "SIGNED_POST_FORM",
    # Input/output models
    "ActionResult",
    "FormSubmission",
    "Redirect",
    "Render",
    # Ports
    "EventDispatcherPort",
    "FormFactoryPort",
    "FormPort",
    "PaginatorPort",
    "PostManipulatorPort",
    "PostStorePort",
    "RouterPort",
]
