"""
Events component - typed notification channel for post lifecycle changes.
"""

from .component import EventDispatcher
from .models import PostEvent, PostEventKind, PostListener

__all__ = [
    "EventDispatcher",
    "PostEvent",
    "PostEventKind",
    "PostListener",
]
