"""Factory Method pattern demo."""

from .module import FactoryMethodDemo

__all__ = ["FactoryMethodDemo"]
