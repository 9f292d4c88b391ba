"""Composite pattern demo."""

from .module import CompositeDemo

__all__ = ["CompositeDemo"]
