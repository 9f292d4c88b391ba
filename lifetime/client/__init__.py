"""Command-line client."""

from .main import main

__all__ = ["main"]
