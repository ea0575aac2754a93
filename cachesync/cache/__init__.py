"""
cachesync - Cache Module

The cache contract synchronizers write to. Concrete backends are supplied by
the application.

Usage:
    from cachesync.cache import CacheInterface

    class DictCache(CacheInterface[User]):
        ...
"""

from .interface import CacheInterface, SupportsCache, apply_in_order, close_cache, resolve

__all__ = [
    "CacheInterface",
    "SupportsCache",
    "apply_in_order",
    "close_cache",
    "resolve",
]
