"""
Pagination component - page slicing and metadata over a page source.
"""

from .component import OutOfRangePageError, Paginator
from .ports import PageSourcePort

__all__ = [
    "OutOfRangePageError",
    "PageSourcePort",
    "Paginator",
]
