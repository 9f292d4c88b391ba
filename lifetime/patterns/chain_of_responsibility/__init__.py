"""Chain of Responsibility pattern demo."""

from .module import ChainOfResponsibilityDemo

__all__ = ["ChainOfResponsibilityDemo"]
