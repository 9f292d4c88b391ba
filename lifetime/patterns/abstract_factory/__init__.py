"""Abstract Factory pattern demo."""

from .module import AbstractFactoryDemo

__all__ = ["AbstractFactoryDemo"]
