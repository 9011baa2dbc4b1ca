"""Typed, null-safe facade over a Redis key-value and hash store."""

import logging
from typing import Any, Dict, Iterable, List, Optional, Set, Type, TypeVar, Union

import redis
from pydantic import TypeAdapter

from cachefacade.errors import InvalidArgumentError
from cachefacade.redis_client import get_redis_client

logger = logging.getLogger(__name__)

T = TypeVar('T')

# TTL sentinels reported by the store
NO_EXPIRY = -1
KEY_MISSING = -2

_ANY_LIST = TypeAdapter(List[Any])


def _text(value: Union[str, bytes, None]) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, bytes):
        return value.decode('utf-8')
    return str(value)


class CacheFacade:
    """
    Thin adapter over one shared ``redis.Redis`` handle.

    Store failures (``redis.exceptions.RedisError`` and subclasses) and list
    decoding failures (``pydantic.ValidationError``) are not caught here.
    """

    def __init__(self, redis_client: redis.Redis):
        self._redis = redis_client

    @property
    def client(self) -> redis.Redis:
        return self._redis

    def exists(self, key: str) -> bool:
        return self._redis.exists(key) > 0

    def get_expire(self, key: str) -> int:
        """
        Remaining time to live of ``key`` in seconds.

        Returns ``NO_EXPIRY`` when the key has no TTL and ``KEY_MISSING`` when
        the key does not exist.
        """
        if key is None:
            raise InvalidArgumentError('key must not be None')
        return self._redis.ttl(key)

    def set(self, key: str, value: str) -> None:
        self._redis.set(key, value)

    def get(self, key: str) -> Optional[str]:
        return _text(self._redis.get(key))

    def delete(self, key: str) -> None:
        if self.exists(key):
            self._redis.delete(key)
        else:
            logger.debug(f"Skip DEL, key not present: {key}")

    def set_and_expire(self, key: str, value: str, seconds: int) -> None:
        # Two commands; a reader in between can see the value without a TTL.
        self._redis.set(key, value)
        self._redis.expire(key, seconds)

    def keys(self, pattern: str) -> Set[str]:
        """Keys ending with ``pattern``; the pattern is always prefixed with ``*``."""
        return {_text(k) for k in self._redis.keys('*' + pattern)}

    def del_keys(self, pattern: str) -> None:
        """Delete every key matching the glob ``pattern`` as given."""
        keys = self._redis.keys(pattern)
        if not keys:
            return
        self._redis.delete(*keys)
        logger.debug(f"Deleted {len(keys)} keys matching {pattern}")

    def hget(self, key: str, field: str) -> Optional[str]:
        return _text(self._redis.hget(key, field))

    def hset(self, key: str, field: str, value: str) -> None:
        self._redis.hset(key, field, value)

    def hdel(self, key: str, field: str) -> None:
        self._redis.hdel(key, field)

    def hgetall(self, key: str) -> Dict[str, str]:
        result = self._redis.hgetall(key)
        if not result:
            return {}
        return {_text(f): _text(v) for f, v in result.items()}

    def hmget(self, key: str, fields: List[str]) -> Dict[str, str]:
        """
        Bulk read of hash fields.

        Fields without a stored value are left out of the result, the others
        keep the order they were requested in.
        """
        if not fields:
            return {}
        values = self._redis.hmget(key, fields)
        return {
            field: _text(value)
            for field, value in zip(fields, values)
            if value is not None
        }

    def hincr(self, key: str, field: str, delta: int) -> int:
        return int(self._redis.hincrby(key, field, delta))

    def hget_list(self, key: str, field: str, element_type: Type[T]) -> List[T]:
        """
        Read a hash field holding a JSON array and validate each element
        as ``element_type`` (a pydantic model, dataclass, dict, scalar...).

        Missing key or field gives an empty list.
        """
        value = self._redis.hget(key, field)
        if value is None:
            return []
        return TypeAdapter(List[element_type]).validate_json(value)

    def hset_list(self, key: str, field: str, values: Iterable[Any]) -> None:
        items = list(values)
        payload = _ANY_LIST.dump_json(items).decode('utf-8')
        self._redis.hset(key, field, payload)
        logger.debug(f"Stored list of {len(items)} items at {key}:{field}")


_facade: Optional[CacheFacade] = None


def get_cache_facade() -> CacheFacade:
    """Process-wide facade over the shared Redis client."""
    global _facade
    if _facade is None:
        _facade = CacheFacade(get_redis_client())
    return _facade
