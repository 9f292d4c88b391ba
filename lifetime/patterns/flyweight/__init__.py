"""Flyweight pattern demo."""

from .module import FlyweightDemo

__all__ = ["FlyweightDemo"]
