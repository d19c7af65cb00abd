"""Shared core entities."""

from .context import RequestContext

__all__ = ["RequestContext"]
