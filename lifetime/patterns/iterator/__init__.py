"""Iterator pattern demo."""

from .module import IteratorDemo

__all__ = ["IteratorDemo"]
