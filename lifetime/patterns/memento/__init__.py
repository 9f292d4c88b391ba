"""Memento pattern demo."""

from .module import MementoDemo

__all__ = ["MementoDemo"]
