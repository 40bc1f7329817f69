"""
Post manipulator - the persistence side effects of the post lifecycle.

Stamps timestamps from the clock, derives a slug from the title when none
was given, and writes through the post repository.
"""

import logging

from blogger.domain.entities import Post
from blogger.domain.text import slugify
from blogger.ports.clock import ClockPort
from blogger.ports.repo import PostRepoPort

logger = logging.getLogger(__name__)


class PostManipulator:
    def __init__(self, repo: PostRepoPort, clock: ClockPort):
        self.repo = repo
        self.clock = clock

    def _unique_slug(self, post: Post) -> str:
        base = post.slug or slugify(post.title)
        slug = base
        suffix = 2
        existing = self.repo.get_by_slug(slug)
        while existing is not None and existing.id != post.id:
            slug = f"{base}-{suffix}"
            suffix += 1
            existing = self.repo.get_by_slug(slug)
        return slug

    def create(self, post: Post) -> None:
        now = self.clock.now()
        post.slug = self._unique_slug(post)
        post.created_at = now
        post.updated_at = now
        if post.published and post.published_at is None:
            post.published_at = now

        self.repo.save(post)
        logger.debug("Persisted new post %s", post.id)

    def update(self, post: Post) -> None:
        now = self.clock.now()
        post.slug = self._unique_slug(post)
        post.updated_at = now
        if not post.published:
            post.published_at = None
        elif post.published_at is None:
            post.published_at = now

        self.repo.save(post)

    def delete(self, post: Post) -> None:
        if post.id is None:
            raise ValueError("Cannot delete a post that was never saved")
        self.repo.delete(post.id)

    def publish(self, post: Post) -> None:
        now = self.clock.now()
        post.published = True
        post.published_at = now
        post.updated_at = now
        self.repo.save(post)

    def unpublish(self, post: Post) -> None:
        post.published = False
        post.published_at = None
        post.updated_at = self.clock.now()
        self.repo.save(post)
