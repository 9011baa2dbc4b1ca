"""Cache Facade Package - typed access to a Redis key-value store."""

from .config import RedisConfig, LogConfig, get_redis_config, get_log_config
from .errors import CacheError, InvalidArgumentError, ResponseCode
from .redis_client import create_redis_client, get_redis_client, close_redis_client
from .facade import CacheFacade, get_cache_facade, NO_EXPIRY, KEY_MISSING
from .logging_config import setup_logging, JSONFormatter, CorrelationFilter

__all__ = [
    'RedisConfig',
    'LogConfig',
    'get_redis_config',
    'get_log_config',
    'CacheError',
    'InvalidArgumentError',
    'ResponseCode',
    'create_redis_client',
    'get_redis_client',
    'close_redis_client',
    'CacheFacade',
    'get_cache_facade',
    'NO_EXPIRY',
    'KEY_MISSING',
    'setup_logging',
    'JSONFormatter',
    'CorrelationFilter'
]
