"""Decorator pattern demo."""

from .module import DecoratorDemo

__all__ = ["DecoratorDemo"]
