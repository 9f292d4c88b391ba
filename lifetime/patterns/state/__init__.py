"""State pattern demo."""

from .module import StateDemo

__all__ = ["StateDemo"]
