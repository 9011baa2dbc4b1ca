"""Checks against a running Redis server; skipped when none is reachable."""

import time

import pytest
import redis
from pydantic import BaseModel

from cachefacade.config import RedisConfig
from cachefacade.facade import CacheFacade, KEY_MISSING, NO_EXPIRY
from cachefacade.redis_client import create_redis_client

PREFIX = 'cachefacade:test:'


class Repayment(BaseModel):
    loan_id: int
    amount: float


@pytest.fixture(scope="module")
def cache():
    client = create_redis_client(RedisConfig.from_env())
    try:
        client.ping()
    except redis.exceptions.RedisError as e:
        pytest.skip(f"Redis not reachable: {e}")
    facade = CacheFacade(client)
    facade.del_keys(PREFIX + '*')
    yield facade
    facade.del_keys(PREFIX + '*')
    client.connection_pool.disconnect()


def test_basic_operations(cache):
    key = PREFIX + 'basic'
    cache.set(key, 'test_value_123')
    assert cache.exists(key)
    assert cache.get(key) == 'test_value_123'
    assert cache.get_expire(key) == NO_EXPIRY

    cache.delete(key)
    assert not cache.exists(key)
    assert cache.get(key) is None
    assert cache.get_expire(key) == KEY_MISSING
    cache.delete(key)


def test_set_and_expire(cache):
    key = PREFIX + 'expiring'
    cache.set_and_expire(key, 'v', 60)
    assert cache.get(key) == 'v'
    assert 0 < cache.get_expire(key) <= 60


def test_keys_and_del_keys(cache):
    cache.set(PREFIX + 'user:1:token', 'a')
    cache.set(PREFIX + 'user:2:token', 'b')
    cache.set(PREFIX + 'user:2:name', 'c')

    assert cache.keys(':token') >= {PREFIX + 'user:1:token', PREFIX + 'user:2:token'}
    assert PREFIX + 'user:2:name' not in cache.keys(':token')

    cache.del_keys(PREFIX + 'user:*')
    assert cache.keys(PREFIX + 'user:*') == set()
    cache.del_keys(PREFIX + 'user:*')


def test_hash_operations(cache):
    key = PREFIX + 'hash'
    cache.hset(key, 'a', '1')
    cache.hset(key, 'b', '2')
    assert cache.hget(key, 'a') == '1'
    assert cache.hgetall(key) == {'a': '1', 'b': '2'}
    assert cache.hmget(key, ['b', 'zzz', 'a']) == {'b': '2', 'a': '1'}

    cache.hdel(key, 'a')
    cache.hdel(key, 'a')
    assert cache.hget(key, 'a') is None
    assert cache.hgetall(PREFIX + 'no-such-hash') == {}


def test_hincr_from_unset(cache):
    key = PREFIX + 'counter'
    for _ in range(5):
        value = cache.hincr(key, 'hits', 1)
    assert value == 5


def test_list_fields(cache):
    key = PREFIX + 'lists'
    repayments = [Repayment(loan_id=1, amount=12.5), Repayment(loan_id=2, amount=40.0)]
    cache.hset_list(key, 'repayments', repayments)
    assert cache.hget_list(key, 'repayments', Repayment) == repayments
    assert cache.hget_list(key, 'missing-field', Repayment) == []
