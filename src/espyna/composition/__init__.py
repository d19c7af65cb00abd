"""Composition root."""

from .container import Container

__all__ = ["Container"]
