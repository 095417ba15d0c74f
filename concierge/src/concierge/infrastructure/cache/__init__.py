"""
Cache infrastructure.
"""

from concierge.infrastructure.cache.i_cache_client import ICacheClient
from concierge.infrastructure.cache.redis_cache_client import (
    RedisCacheClient,
    build_cache,
)

__all__ = [
    "ICacheClient",
    "RedisCacheClient",
    "build_cache",
]
