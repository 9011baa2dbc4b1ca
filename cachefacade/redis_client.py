"""Redis client factory for the cache facade."""

import logging
from typing import Optional

import redis

from cachefacade.config import RedisConfig, get_redis_config

logger = logging.getLogger(__name__)

_client: Optional[redis.Redis] = None


def create_redis_client(config: Optional[RedisConfig] = None) -> redis.Redis:
    config = config or get_redis_config()
    pool = redis.ConnectionPool(**config.to_pool_kwargs())
    logger.info(f"Redis connection pool created for {config.host}:{config.port}/{config.db}")
    return redis.Redis(connection_pool=pool)


def get_redis_client() -> redis.Redis:
    """Process-wide client, created on first use."""
    global _client
    if _client is None:
        _client = create_redis_client()
    return _client


def close_redis_client():
    global _client
    if _client is not None:
        _client.connection_pool.disconnect()
        logger.info("Redis connection pool closed")
        _client = None
