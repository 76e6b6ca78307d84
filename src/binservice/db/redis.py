"""Redis client for the cache."""

import logging

import redis

from ..config import Settings

logger = logging.getLogger(__name__)


def create_redis_client(settings: Settings) -> redis.Redis:
    """Create a Redis client backed by a shared connection pool.

    Connections are established lazily, so an unreachable server surfaces on
    the first command rather than here.
    """
    client = redis.Redis.from_url(
        settings.redis_url,
        decode_responses=True,
        socket_connect_timeout=2,
    )
    logger.info(f"Redis client configured for {settings.redis_url.split('@')[-1]}")
    return client
