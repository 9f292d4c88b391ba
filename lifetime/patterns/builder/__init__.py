"""Builder pattern demo."""

from .module import BuilderDemo

__all__ = ["BuilderDemo"]
