from typing import Optional

from fastapi_cache import FastAPICache
from fastapi_cache.backends.inmemory import InMemoryBackend
from fastapi_cache.backends.redis import RedisBackend
from redis import asyncio as aioredis

from weekday_service.config import CACHE_PREFIX


async def init_cache(redis_url: str = "") -> Optional[aioredis.Redis]:
    """
    Initialise FastAPI Cache and clear any stale entries.

    Args:
        redis_url (str): Redis connection URL. When empty, responses are cached
            in process memory instead.

    Returns:
        The Redis client the caller must close on shutdown, or None for the
        in-memory backend.
    """
    redis = None
    if redis_url:
        redis = aioredis.from_url(redis_url)
        FastAPICache.init(RedisBackend(redis), prefix=CACHE_PREFIX)
    else:
        FastAPICache.init(InMemoryBackend(), prefix=CACHE_PREFIX)
    await FastAPICache.clear()
    return redis
