"""Bridge pattern demo."""

from .module import BridgeDemo

__all__ = ["BridgeDemo"]
