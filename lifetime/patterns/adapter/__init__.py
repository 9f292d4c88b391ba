"""Adapter pattern demo."""

from .module import AdapterDemo

__all__ = ["AdapterDemo"]
