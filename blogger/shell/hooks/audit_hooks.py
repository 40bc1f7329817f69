"""
AuditHooks - audit trail for post lifecycle events.

Subscribes to every post event on the dispatcher and writes one audit line
per event to the ``blogger.audit`` logger.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

from blogger.components.events import EventDispatcher, PostEvent, PostEventKind

audit_logger = logging.getLogger("blogger.audit")

AuditAction = Literal["create", "update", "delete", "publish", "unpublish"]

ACTIONS: dict[PostEventKind, AuditAction] = {
    PostEventKind.CREATED: "create",
    PostEventKind.UPDATED: "update",
    PostEventKind.DELETED: "delete",
    PostEventKind.PUBLISHED: "publish",
    PostEventKind.UNPUBLISHED: "unpublish",
}


@dataclass
class HooksConfig:
    """Configuration for audit hooks."""

    enabled: bool = True
    level: int = logging.INFO


class AuditHooks:
    def __init__(self, config: HooksConfig | None = None) -> None:
        self._config = config or HooksConfig()

    def register(self, dispatcher: EventDispatcher) -> None:
        dispatcher.add_global_listener(self.on_post_event)

    def on_post_event(self, event: PostEvent) -> None:
        if not self._config.enabled:
            return

        post = event.post
        # New posts have no id yet: creation is dispatched before the save
        audit_logger.log(
            self._config.level,
            "action=%s entity=post id=%s slug=%s title=%r author=%r",
            ACTIONS[event.kind],
            post.id if post.id is not None else "new",
            post.slug or "-",
            post.title,
            post.author,
        )
