"""Blogger backend: post administration over FastAPI."""

__version__ = "0.1.0"
