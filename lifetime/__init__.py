"""LifeTime - a catalog of Gang-of-Four design pattern demos."""

__version__ = "1.0.0"
