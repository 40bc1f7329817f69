import sqlite3
from datetime import datetime
from typing import Any

from blogger.components.pagination import Paginator
from blogger.components.sorting import PostSorter
from blogger.domain.entities import SORTABLE_POST_FIELDS, Post


# Helper to convert sqlite rows to dicts
def dict_factory(cursor: sqlite3.Cursor, row: Any) -> dict[str, Any]:
    d = {}
    for idx, col in enumerate(cursor.description):
        d[col[0]] = row[idx]
    return d


def _parse_dt(s: str | None) -> datetime | None:
    return datetime.fromisoformat(s) if s else None


def _format_dt(dt: datetime | None) -> str | None:
    return dt.isoformat() if dt else None


def _row_to_post(row: dict[str, Any]) -> Post:
    return Post(
        id=row["id"],
        title=row["title"],
        slug=row["slug"],
        author=row["author"],
        content=row["content"],
        published=bool(row["published"]),
        published_at=_parse_dt(row["published_at"]),
        created_at=_parse_dt(row["created_at"]),
        updated_at=_parse_dt(row["updated_at"]),
    )


class _SQLiteConnectionMixin:
    db_path: str

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        conn.execute("PRAGMA foreign_keys = ON;")
        return conn


class SQLitePostPageSource(_SQLiteConnectionMixin):
    """Ordered post query sliced page by page."""

    def __init__(self, db_path: str, sorter: PostSorter):
        if sorter.field not in SORTABLE_POST_FIELDS:
            raise ValueError(f"Cannot sort posts by '{sorter.field}'")
        self.db_path = db_path
        self.sorter = sorter

    def _order_by(self) -> str:
        direction = "DESC" if self.sorter.order == "desc" else "ASC"
        return f"{self.sorter.field} {direction}, id {direction}"

    def count(self) -> int:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT COUNT(*) AS n FROM posts").fetchone()
            return int(row["n"])
        finally:
            conn.close()

    def slice(self, offset: int, length: int) -> list[Post]:
        conn = self._get_conn()
        try:
            rows = conn.execute(
                f"SELECT * FROM posts ORDER BY {self._order_by()} LIMIT ? OFFSET ?",
                (length, offset),
            ).fetchall()
            return [_row_to_post(row) for row in rows]
        finally:
            conn.close()


class SQLitePostRepo(_SQLiteConnectionMixin):
    def __init__(self, db_path: str):
        self.db_path = db_path

    def save(self, post: Post) -> Post:
        conn = self._get_conn()
        try:
            values = (
                post.title,
                post.slug,
                post.author,
                post.content,
                int(post.published),
                _format_dt(post.published_at),
                _format_dt(post.created_at),
                _format_dt(post.updated_at),
            )
            if post.id is None:
                cursor = conn.execute(
                    """
                    INSERT INTO posts (
                        title, slug, author, content, published,
                        published_at, created_at, updated_at
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                    values,
                )
                post.id = cursor.lastrowid
            else:
                conn.execute(
                    """
                    UPDATE posts SET
                        title = ?, slug = ?, author = ?, content = ?, published = ?,
                        published_at = ?, created_at = ?, updated_at = ?
                    WHERE id = ?
                """,
                    (*values, post.id),
                )
            conn.commit()
            return post
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def get_by_id(self, post_id: int) -> Post | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT * FROM posts WHERE id = ?", (post_id,)).fetchone()
            return _row_to_post(row) if row else None
        finally:
            conn.close()

    def get_by_slug(self, slug: str) -> Post | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT * FROM posts WHERE slug = ?", (slug,)).fetchone()
            return _row_to_post(row) if row else None
        finally:
            conn.close()

    def delete(self, post_id: int) -> None:
        conn = self._get_conn()
        try:
            conn.execute("DELETE FROM posts WHERE id = ?", (post_id,))
            conn.commit()
        finally:
            conn.close()

    def paginate(self, sorter: PostSorter, max_per_page: int) -> Paginator[Post]:
        return Paginator(SQLitePostPageSource(self.db_path, sorter), max_per_page)
