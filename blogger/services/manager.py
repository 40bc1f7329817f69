from blogger.components.pagination import Paginator
from blogger.components.sorting import PostSorter
from blogger.domain.entities import Post
from blogger.ports.repo import PostRepoPort


class PostManager:
    """Post store: creates, finds and paginates posts."""

    def __init__(self, repo: PostRepoPort, max_per_page: int = 10):
        self.repo = repo
        self.max_per_page = max_per_page

    def create_post(self) -> Post:
        return Post()

    def find_post(self, post_id: int) -> Post | None:
        return self.repo.get_by_id(post_id)

    def create_paginator(self, sorter: PostSorter) -> Paginator[Post]:
        return self.repo.paginate(sorter, self.max_per_page)
