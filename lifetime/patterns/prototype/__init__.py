"""Prototype pattern demo."""

from .module import PrototypeDemo

__all__ = ["PrototypeDemo"]
