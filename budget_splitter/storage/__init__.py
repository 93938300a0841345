"""Storage module for per-user budget categories."""

from .category_store import CategoryStore

__all__ = ["CategoryStore"]
