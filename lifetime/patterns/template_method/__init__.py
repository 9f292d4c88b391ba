"""Template Method pattern demo."""

from .module import TemplateMethodDemo

__all__ = ["TemplateMethodDemo"]
