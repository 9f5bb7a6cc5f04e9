"""
Storage Module
存储模块 - 内存缓存
"""
from .cache import (
    BaseCache,
    MemoryCache,
    CacheStats,
    cached_call,
    get_cache,
)

__all__ = [
    "BaseCache",
    "MemoryCache",
    "CacheStats",
    "cached_call",
    "get_cache",
]
