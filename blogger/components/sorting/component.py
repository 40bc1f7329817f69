"""
Sorting component - the sort specification for post listings.

The sorter is built from the ``sort`` and ``order`` query parameters and is
restricted to the configured sortable fields. Unknown fields and orders fall
back to the configured defaults rather than failing the request.
"""

from __future__ import annotations

from dataclasses import dataclass

from blogger.config.models import SortingConfig, SortOrder

_ORDERS: tuple[SortOrder, ...] = ("asc", "desc")


@dataclass(frozen=True)
class PostSorter:
    """Which field posts are ordered by, and in which direction."""

    field: str
    order: SortOrder
    sortable_fields: tuple[str, ...]

    @classmethod
    def from_query(
        cls,
        sort: str | None,
        order: str | None,
        config: SortingConfig,
    ) -> PostSorter:
        sortable = tuple(config.sortable_fields)
        field = sort if sort in sortable else config.default_field
        direction: SortOrder = config.default_order
        if order is not None and order.lower() in _ORDERS:
            direction = "asc" if order.lower() == "asc" else "desc"
        return cls(field=field, order=direction, sortable_fields=sortable)

    def is_sorted_by(self, field: str) -> bool:
        return self.field == field

    def order_for(self, field: str) -> SortOrder:
        """Order a sort link on ``field`` should request (toggles the active one)."""
        if self.is_sorted_by(field):
            return "asc" if self.order == "desc" else "desc"
        return "asc"

    def query_params(self) -> dict[str, str]:
        return {"sort": self.field, "order": self.order}
