"""Proxy pattern demo."""

from .module import ProxyDemo

__all__ = ["ProxyDemo"]
