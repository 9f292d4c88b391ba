"""Command pattern demo."""

from .module import CommandDemo

__all__ = ["CommandDemo"]
