"""
Post controller - backend post lifecycle orchestration.

Lists, shows, creates, updates, deletes, publishes and unpublishes posts.
Every action that targets an existing post resolves it first and fails with
PostNotFoundError when it does not exist.

Mutations dispatch their lifecycle event before the manipulator persists the
change, so listeners see the post in its submitted state. Publish and
unpublish only act when the post is not already in the target state; the
redirect back to the list happens either way.
"""

from __future__ import annotations

import logging

from blogger.components.events import PostEventKind
from blogger.components.sorting import PostSorter
from blogger.domain.entities import Post
from blogger.domain.errors import PostNotFoundError

from .models import ActionResult, FormSubmission, Redirect, Render
from .ports import (
    EventDispatcherPort,
    FormFactoryPort,
    PostManipulatorPort,
    PostStorePort,
    RouterPort,
)

logger = logging.getLogger(__name__)

LIST_ROUTE = "blogger_backend_post_list"
SHOW_ROUTE = "blogger_backend_post_show"

POST_FORM = "blogger_post"
SIGNED_POST_FORM = "blogger_signed_post"


class PostController:
    def __init__(
        self,
        *,
        store: PostStorePort,
        manipulator: PostManipulatorPort,
        dispatcher: EventDispatcherPort,
        form_factory: FormFactoryPort,
        router: RouterPort,
        form_name: str = POST_FORM,
        engine: str = "html",
    ) -> None:
        self.store = store
        self.manipulator = manipulator
        self.dispatcher = dispatcher
        self.form_factory = form_factory
        self.router = router
        self.form_name = form_name
        self.engine = engine

    def _template(self, name: str) -> str:
        return f"backend/post/{name}.{self.engine}"

    def _redirect_to_list(self) -> Redirect:
        return Redirect(self.router.generate(LIST_ROUTE))

    def find_post_or_404(self, post_id: int) -> Post:
        post = self.store.find_post(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post

    # --- Read actions ---

    def list(self, sorter: PostSorter, page: int = 1) -> Render:
        """Table of posts for the requested page."""
        paginator = self.store.create_paginator(sorter)
        paginator.set_current_page(page, True, True)

        posts = paginator.get_current_page_results()

        return Render(
            self._template("list"),
            {"posts": posts, "paginator": paginator, "sorter": sorter},
        )

    def show(self, post_id: int) -> Render:
        post = self.find_post_or_404(post_id)
        return Render(self._template("show"), {"post": post})

    # --- Write actions ---

    def create(self, request: FormSubmission, author: str | None = None) -> ActionResult:
        """
        Create a post from a submitted form.

        When the configured form has no author field, ``author`` (the current
        identity) is assigned to the new post instead.
        """
        post = self.store.create_post()
        form = self.form_factory.create(self.form_name, post)

        if request.is_submitted():
            form.bind(request.data)

            if form.is_valid():
                if author is not None and "author" not in form.fields:
                    post.author = author

                self.dispatcher.dispatch(PostEventKind.CREATED, post)
                self.manipulator.create(post)
                logger.info("Created post %s (%r)", post.id, post.title)

                return self._redirect_to_list()

        return Render(self._template("create"), {"form": form.create_view()})

    def update(self, post_id: int, request: FormSubmission) -> ActionResult:
        post = self.find_post_or_404(post_id)
        form = self.form_factory.create(self.form_name, post)

        if request.is_submitted():
            form.bind(request.data)

            if form.is_valid():
                self.dispatcher.dispatch(PostEventKind.UPDATED, post)
                self.manipulator.update(post)
                logger.info("Updated post %s", post.id)

                return Redirect(self.router.generate(SHOW_ROUTE, post_id=post.id))

        return Render(self._template("update"), {"form": form.create_view(), "post": post})

    def delete(self, post_id: int) -> Redirect:
        post = self.find_post_or_404(post_id)

        self.dispatcher.dispatch(PostEventKind.DELETED, post)
        self.manipulator.delete(post)
        logger.info("Deleted post %s", post_id)

        return self._redirect_to_list()

    def publish(self, post_id: int) -> Redirect:
        post = self.find_post_or_404(post_id)

        if not post.is_published():
            self.dispatcher.dispatch(PostEventKind.PUBLISHED, post)
            self.manipulator.publish(post)
            logger.info("Published post %s", post_id)
        else:
            logger.debug("Post %s already published", post_id)

        return self._redirect_to_list()

    def unpublish(self, post_id: int) -> Redirect:
        post = self.find_post_or_404(post_id)

        if post.is_published():
            self.dispatcher.dispatch(PostEventKind.UNPUBLISHED, post)
            self.manipulator.unpublish(post)
            logger.info("Unpublished post %s", post_id)
        else:
            logger.debug("Post %s already unpublished", post_id)

        return self._redirect_to_list()
