"""
Event component - synchronous publish/subscribe for post lifecycle events.

Listeners are called in registration order, in the dispatching thread.
Whatever a listener returns is ignored; an exception raised by a listener
propagates to the dispatcher's caller.
"""

from __future__ import annotations

import logging
from collections import defaultdict

from blogger.domain.entities import Post

from .models import PostEvent, PostEventKind, PostListener

logger = logging.getLogger(__name__)


class EventDispatcher:
    def __init__(self) -> None:
        self._listeners: dict[PostEventKind, list[PostListener]] = defaultdict(list)

    def add_listener(self, kind: PostEventKind, listener: PostListener) -> None:
        self._listeners[kind].append(listener)

    def add_global_listener(self, listener: PostListener) -> None:
        """Subscribe a listener to every event kind."""
        for kind in PostEventKind:
            self.add_listener(kind, listener)

    def get_listeners(self, kind: PostEventKind) -> list[PostListener]:
        return list(self._listeners.get(kind, []))

    def dispatch(self, kind: PostEventKind, post: Post) -> PostEvent:
        event = PostEvent(kind=kind, post=post)
        listeners = self.get_listeners(kind)
        logger.debug("Dispatching %s for post %s to %d listener(s)", kind.value, post.id, len(listeners))

        for listener in listeners:
            listener(event)

        return event
