from core.cache import CACHE_TTL, CacheEntry, ResultCache
from core.utils import debug, info, warn, error

__all__ = [
    "CACHE_TTL",
    "CacheEntry",
    "ResultCache",
    "debug",
    "info",
    "warn",
    "error",
]
