"""Visitor pattern demo."""

from .module import VisitorDemo

__all__ = ["VisitorDemo"]
