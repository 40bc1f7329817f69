from typing import Protocol

from blogger.components.pagination import Paginator
from blogger.components.sorting import PostSorter
from blogger.domain.entities import Post


class PostRepoPort(Protocol):
    def get_by_id(self, post_id: int) -> Post | None:
        ...

    def get_by_slug(self, slug: str) -> Post | None:
        ...

    def save(self, post: Post) -> Post:
        """Insert when ``post.id`` is None (assigning it), update otherwise."""
        ...

    def delete(self, post_id: int) -> None:
        ...

    def paginate(self, sorter: PostSorter, max_per_page: int) -> Paginator[Post]:
        ...
