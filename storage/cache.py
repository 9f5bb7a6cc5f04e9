"""
Cache
缓存模块 - 内存 TTL + LRU 缓存, 支持并发请求合并 (request coalescing)
"""
from abc import ABC, abstractmethod
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Optional
import asyncio
import hashlib
import logging
import threading
import time


logger = logging.getLogger(__name__)

Producer = Callable[[], Awaitable[Any]]

_MISSING = object()


@dataclass
class _CacheEntry:
    value: Any
    created_at: float
    expires_at: float


@dataclass(frozen=True)
class CacheStats:
    """缓存统计"""
    hits: int
    misses: int
    evictions: int
    size: int
    hit_rate: float  # 百分比, 保留两位小数


class BaseCache(ABC):
    """
    缓存抽象基类
    """

    def __init__(self, ttl: Optional[float] = None):
        """
        初始化缓存

        Args:
            ttl: 默认过期时间 (秒)
        """
        self.ttl = ttl

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """获取缓存值"""
        pass

    @abstractmethod
    def set(self, key: str, value: Any, ttl: Optional[float] = None) -> None:
        """设置缓存值"""
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """删除缓存"""
        pass

    @abstractmethod
    def clear(self) -> None:
        """清空缓存"""
        pass

    @abstractmethod
    def exists(self, key: str) -> bool:
        """检查键是否存在"""
        pass

    @abstractmethod
    async def get_or_set(
        self,
        key: str,
        producer: Producer,
        ttl: Optional[float] = None,
    ) -> Any:
        """获取缓存，不存在则通过 producer 创建"""
        pass

    @staticmethod
    def make_key(*args, **kwargs) -> str:
        """
        根据参数生成缓存键

        Args:
            *args: 位置参数
            **kwargs: 关键字参数

        Returns:
            缓存键
        """
        key_parts = [str(arg) for arg in args]
        key_parts.extend([f"{k}={v}" for k, v in sorted(kwargs.items())])
        key_string = ":".join(key_parts)
        return hashlib.md5(key_string.encode()).hexdigest()


def _consume_exception(task: "asyncio.Future") -> None:
    # 所有等待者都放弃时, 避免 "exception was never retrieved"
    if not task.cancelled():
        task.exception()


class MemoryCache(BaseCache):
    """
    内存缓存

    - TTL 惰性过期 (get/has 时检查), cleanup() 主动清理
    - LRU 淘汰: 容量已满且写入新键时淘汰最久未访问的条目
    - get_or_set 合并同一个键的并发请求, producer 在重叠窗口内只执行一次

    条目表、访问顺序和进行中请求表由同一把锁保护。
    """

    def __init__(
        self,
        ttl: float = 300,
        max_size: int = 100,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        初始化内存缓存

        Args:
            ttl: 默认过期时间 (秒)
            max_size: 默认最大缓存条目数
            clock: 单调时钟, 测试中可替换
        """
        super().__init__(ttl)
        self.max_size = max_size
        self._clock = clock
        self._lock = threading.Lock()
        # OrderedDict 的顺序即访问顺序, 队首最久未访问
        self._entries: "OrderedDict[str, _CacheEntry]" = OrderedDict()
        self._in_flight: Dict[str, "asyncio.Future"] = {}
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def _lookup(self, key: str) -> Any:
        """需持有锁"""
        entry = self._entries.get(key)
        if entry is None:
            self._misses += 1
            return _MISSING

        if self._clock() >= entry.expires_at:
            del self._entries[key]
            self._misses += 1
            return _MISSING

        self._entries.move_to_end(key)
        self._hits += 1
        return entry.value

    def _store(
        self,
        key: str,
        value: Any,
        ttl: Optional[float],
        max_size: Optional[int],
    ) -> None:
        """需持有锁"""
        ttl = self.ttl if ttl is None else ttl
        max_size = self.max_size if max_size is None else max_size

        if key not in self._entries:
            while self._entries and len(self._entries) >= max_size:
                evicted_key, _ = self._entries.popitem(last=False)
                self._evictions += 1
                logger.debug(f"Evicted LRU cache entry {evicted_key}")

        now = self._clock()
        self._entries[key] = _CacheEntry(value=value, created_at=now, expires_at=now + ttl)
        self._entries.move_to_end(key)

    def get(self, key: str) -> Optional[Any]:
        """获取缓存值, 未命中或已过期返回 None"""
        with self._lock:
            value = self._lookup(key)
        return None if value is _MISSING else value

    def set(
        self,
        key: str,
        value: Any,
        ttl: Optional[float] = None,
        max_size: Optional[int] = None,
    ) -> None:
        """设置缓存值"""
        with self._lock:
            self._store(key, value, ttl, max_size)

    def has(self, key: str) -> bool:
        """检查键是否存在且未过期"""
        with self._lock:
            return self._lookup(key) is not _MISSING

    def exists(self, key: str) -> bool:
        return self.has(key)

    def delete(self, key: str) -> None:
        """删除缓存"""
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        """清空缓存和统计"""
        with self._lock:
            self._entries.clear()
            self._in_flight.clear()
            self._hits = 0
            self._misses = 0
            self._evictions = 0

    def cleanup(self) -> int:
        """清理所有过期条目, 返回清理数量"""
        with self._lock:
            now = self._clock()
            expired_keys = [k for k, v in self._entries.items() if now >= v.expires_at]
            for key in expired_keys:
                del self._entries[key]
        if expired_keys:
            logger.debug(f"Cleaned up {len(expired_keys)} expired cache entries")
        return len(expired_keys)

    def size(self) -> int:
        """返回缓存大小"""
        with self._lock:
            return len(self._entries)

    def stats(self) -> CacheStats:
        """返回缓存统计"""
        with self._lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total) * 100 if total else 0.0
            return CacheStats(
                hits=self._hits,
                misses=self._misses,
                evictions=self._evictions,
                size=len(self._entries),
                hit_rate=round(hit_rate, 2),
            )

    async def get_or_set(
        self,
        key: str,
        producer: Producer,
        ttl: Optional[float] = None,
        max_size: Optional[int] = None,
    ) -> Any:
        """
        获取缓存，不存在则通过 producer 创建

        同一个键的并发调用共享同一个进行中的任务; 只有成功结果会被缓存,
        producer 的异常会传递给所有等待者。等待者被取消不会取消 producer。

        Args:
            key: 缓存键
            producer: 无参协程工厂
            ttl: 过期时间 (秒)
            max_size: 本次写入使用的容量上限

        Returns:
            缓存值或新创建的值
        """
        with self._lock:
            value = self._lookup(key)
            if value is not _MISSING:
                return value

            task = self._in_flight.get(key)
            if task is None:
                task = asyncio.ensure_future(self._produce(key, producer, ttl, max_size))
                task.add_done_callback(_consume_exception)
                self._in_flight[key] = task
            else:
                logger.debug(f"Coalescing in-flight request for {key}")

        return await asyncio.shield(task)

    async def _produce(
        self,
        key: str,
        producer: Producer,
        ttl: Optional[float],
        max_size: Optional[int],
    ) -> Any:
        task = asyncio.current_task()
        try:
            value = await producer()
        except BaseException:
            with self._lock:
                self._release(key, task)
            raise

        with self._lock:
            self._store(key, value, ttl, max_size)
            self._release(key, task)
        return value

    def _release(self, key: str, task: Optional["asyncio.Future"]) -> None:
        """需持有锁; clear() 之后同一个键可能已经换成了新的任务"""
        if self._in_flight.get(key) is task:
            del self._in_flight[key]


async def cached_call(
    cache: MemoryCache,
    key: str,
    producer: Producer,
    ttl: Optional[float] = None,
    force_refresh: bool = False,
) -> Any:
    """
    通过缓存执行一次外部调用

    force_refresh 时先丢弃已有条目, 再走 get_or_set (仍会与进行中的请求合并)
    """
    if force_refresh:
        cache.delete(key)
    return await cache.get_or_set(key, producer, ttl=ttl)


# 工厂函数
_default_memory_cache: Optional[MemoryCache] = None


def get_cache() -> MemoryCache:
    """
    获取进程级默认内存缓存

    Returns:
        缓存实例
    """
    global _default_memory_cache

    if _default_memory_cache is None:
        from config import get_cache_settings

        settings = get_cache_settings()
        _default_memory_cache = MemoryCache(ttl=settings.ttl, max_size=settings.max_size)
    return _default_memory_cache
