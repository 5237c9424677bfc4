"""Common middleware for the conference backend."""

from .observability import StructlogContextMiddleware

__all__ = ["StructlogContextMiddleware"]
