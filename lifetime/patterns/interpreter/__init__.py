"""Interpreter pattern demo."""

from .module import InterpreterDemo

__all__ = ["InterpreterDemo"]
