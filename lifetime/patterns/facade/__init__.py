"""Facade pattern demo."""

from .module import FacadeDemo

__all__ = ["FacadeDemo"]
