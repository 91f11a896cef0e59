from .ttl import CacheEntry, TTLCached, async_cache

__all__ = ("CacheEntry", "TTLCached", "async_cache")
