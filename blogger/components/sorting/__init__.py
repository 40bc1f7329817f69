"""
Sorting component - sort specification for post listings.
"""

from .component import PostSorter

__all__ = ["PostSorter"]
