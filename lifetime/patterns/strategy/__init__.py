"""Strategy pattern demo."""

from .module import StrategyDemo

__all__ = ["StrategyDemo"]
