"""Cache subsystem: content-addressed markup files with expiry in the file name."""

from img2html.cache.keys import generate_cache_key
from img2html.cache.stats import CACHE_EXT, CacheEntry, CacheStats
from img2html.cache.store import FileCacheStore, ensure_cache_dir

__all__ = [
    "CACHE_EXT",
    "CacheEntry",
    "CacheStats",
    "FileCacheStore",
    "ensure_cache_dir",
    "generate_cache_key",
]
