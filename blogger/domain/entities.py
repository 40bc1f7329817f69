from datetime import datetime

from pydantic import BaseModel

# --- Posts ---


class Post(BaseModel):
    """A blog entry.

    ``id`` stays ``None`` until the store has saved the post for the first time.
    """

    id: int | None = None
    title: str = ""
    slug: str = ""
    author: str = ""
    content: str = ""
    published: bool = False
    published_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def is_published(self) -> bool:
        return self.published


# Fields a post listing can be ordered by
SORTABLE_POST_FIELDS = frozenset(
    {"id", "title", "slug", "author", "published", "published_at", "created_at", "updated_at"}
)
