"""Core catalog functionality."""

from .pattern_system import Demo, DemoRegistry, DemoConfig, CATEGORIES

__all__ = ["Demo", "DemoRegistry", "DemoConfig", "CATEGORIES"]
