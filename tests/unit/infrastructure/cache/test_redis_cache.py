# nosec B101


import json
from datetime import timedelta
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import TimeoutError as RedisTimeoutError

from domain.exceptions.currency import CacheError
from domain.models.currency import RateSnapshot
from infrastructure.cache.redis_cache import RedisCacheService


# ============================================================================
# TEST: get_rates() - Cache Read Scenarios
# ============================================================================

@pytest.mark.asyncio
async def test_get_rates_cache_hit_returns_snapshot():
    mock_redis = AsyncMock()
    mock_redis.get.return_value = json.dumps([
        {'currencyCodeA': 840, 'currencyCodeB': 980, 'date': 1728105373, 'rateBuy': 27.0, 'rateSell': 27.5},
        {'currencyCodeA': 985, 'currencyCodeB': 980, 'date': 1728105373, 'rateCross': 10.35},
    ])
    cache_service = RedisCacheService(redis_client=mock_redis)

    result = await cache_service.get_rates()

    assert isinstance(result, RateSnapshot)
    assert len(result) == 2
    usd, pln = result.records
    assert usd.rate_buy == Decimal('27.0')
    assert usd.rate_sell == Decimal('27.5')
    assert pln.rate_cross == Decimal('10.35')
    mock_redis.get.assert_called_once_with('exchangeRates')


@pytest.mark.asyncio
async def test_get_rates_cache_miss_returns_none():
    mock_redis = AsyncMock()
    mock_redis.get.return_value = None

    cache_service = RedisCacheService(redis_client=mock_redis)

    assert await cache_service.get_rates() is None
    mock_redis.get.assert_called_once_with('exchangeRates')


@pytest.mark.asyncio
async def test_get_rates_empty_list_is_a_hit():
    mock_redis = AsyncMock()
    mock_redis.get.return_value = '[]'

    cache_service = RedisCacheService(redis_client=mock_redis)
    result = await cache_service.get_rates()

    assert result == RateSnapshot([])


# ============================================================================
# TEST: get_rates() - Edge Cases and Error Scenarios
# ============================================================================

@pytest.mark.asyncio
async def test_get_rates_malformed_json_raises_cache_error():
    mock_redis = AsyncMock()
    mock_redis.get.return_value = "{ invalid json }"

    cache_service = RedisCacheService(redis_client=mock_redis)

    with pytest.raises(CacheError) as exc_info:
        await cache_service.get_rates()

    assert 'Invalid json data' in str(exc_info.value)


@pytest.mark.asyncio
async def test_get_rates_malformed_record_raises_cache_error():
    mock_redis = AsyncMock()
    mock_redis.get.return_value = json.dumps([{'currencyCodeB': 980}])

    cache_service = RedisCacheService(redis_client=mock_redis)

    with pytest.raises(CacheError) as exc_info:
        await cache_service.get_rates()

    assert 'Malformed rate records' in str(exc_info.value)


@pytest.mark.asyncio
async def test_get_rates_redis_unavailable_raises_cache_error():
    mock_redis = AsyncMock()
    mock_redis.get.side_effect = RedisConnectionError('Connection refused')

    cache_service = RedisCacheService(redis_client=mock_redis)

    with pytest.raises(CacheError) as exc_info:
        await cache_service.get_rates()

    assert 'Redis read failed' in str(exc_info.value)


# ============================================================================
# TEST: set_rates() - Cache Write Scenarios
# ============================================================================

@pytest.mark.asyncio
async def test_set_rates_serializes_and_stores_with_ttl(rate_snapshot):
    mock_redis = AsyncMock()
    cache_service = RedisCacheService(redis_client=mock_redis, ttl_seconds=3600)

    await cache_service.set_rates(rate_snapshot)

    mock_redis.setex.assert_called_once()
    key, ttl, stored_data = mock_redis.setex.call_args[0]

    assert key == 'exchangeRates'
    assert ttl == timedelta(seconds=3600)

    stored = json.loads(stored_data)
    assert len(stored) == len(rate_snapshot)
    assert stored[0] == {
        'currencyCodeA': 840,
        'currencyCodeB': 978,
        'date': 1728105373,
        'rateBuy': 0.85,
        'rateSell': 0.86,
    }


@pytest.mark.asyncio
async def test_set_rates_round_trip_consistency(rate_snapshot):
    mock_redis = AsyncMock()
    cache_service = RedisCacheService(redis_client=mock_redis)

    await cache_service.set_rates(rate_snapshot)

    mock_redis.get.return_value = mock_redis.setex.call_args[0][2]
    assert await cache_service.get_rates() == rate_snapshot


@pytest.mark.asyncio
async def test_set_rates_redis_timeout_raises_cache_error(rate_snapshot):
    mock_redis = AsyncMock()
    mock_redis.setex.side_effect = RedisTimeoutError('Timeout writing to socket')

    cache_service = RedisCacheService(redis_client=mock_redis)

    with pytest.raises(CacheError) as exc_info:
        await cache_service.set_rates(rate_snapshot)

    assert 'Redis write failed' in str(exc_info.value)


# ============================================================================
# TEST: TTL Configuration
# ============================================================================

def test_default_ttl_value():
    cache_service = RedisCacheService(redis_client=AsyncMock())

    assert cache_service.rate_ttl == timedelta(hours=1)


def test_custom_ttl_value():
    cache_service = RedisCacheService(redis_client=AsyncMock(), ttl_seconds=120)

    assert cache_service.rate_ttl == timedelta(minutes=2)


@pytest.mark.asyncio
async def test_close_closes_client():
    mock_redis = AsyncMock()
    cache_service = RedisCacheService(redis_client=mock_redis)

    await cache_service.close()

    mock_redis.aclose.assert_awaited_once()


@pytest.mark.asyncio
async def test_set_rates_stores_monobank_wire_form(monobank_rates):
    mock_redis = AsyncMock()
    cache_service = RedisCacheService(redis_client=mock_redis)

    await cache_service.set_rates(RateSnapshot.from_list(monobank_rates))

    assert json.loads(mock_redis.setex.call_args[0][2]) == monobank_rates


@pytest.mark.asyncio
async def test_set_rates_keeps_zero_rates():
    mock_redis = AsyncMock()
    cache_service = RedisCacheService(redis_client=mock_redis)
    wire = [{'currencyCodeA': 840, 'currencyCodeB': 978, 'date': 1, 'rateBuy': 0, 'rateSell': 0.86}]

    await cache_service.set_rates(RateSnapshot.from_list(wire))

    assert json.loads(mock_redis.setex.call_args[0][2]) == wire
