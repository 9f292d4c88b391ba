"""Mediator pattern demo."""

from .module import MediatorDemo

__all__ = ["MediatorDemo"]
