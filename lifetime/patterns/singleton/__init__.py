"""Singleton pattern demo."""

from .module import SingletonDemo

__all__ = ["SingletonDemo"]
