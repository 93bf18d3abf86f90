"""
Cache Infrastructure

Concrete cache implementations.
"""

from .result_cache import ResultCache, CacheRecord

__all__ = [
    "ResultCache",
    "CacheRecord",
]
