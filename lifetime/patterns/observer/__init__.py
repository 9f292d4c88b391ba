"""Observer pattern demo."""

from .module import ObserverDemo

__all__ = ["ObserverDemo"]
