# nosec B101


from unittest.mock import AsyncMock, Mock

import pytest

from application.services import RateService
from domain.exceptions.currency import CacheError
from domain.models.currency import RateSnapshot
from infrastructure.cache.memory_cache import InMemoryCacheService


class FakeClock:
    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def provider(rate_snapshot):
    mock_provider = Mock()
    mock_provider.name = 'monobank'
    mock_provider.fetch_rates = AsyncMock(return_value=rate_snapshot)
    return mock_provider


@pytest.mark.asyncio
async def test_cache_miss_fetches_and_stores(provider, rate_snapshot):
    cache = InMemoryCacheService()
    service = RateService(provider=provider, cache=cache)

    snapshot = await service.get_snapshot()

    assert snapshot == rate_snapshot
    provider.fetch_rates.assert_awaited_once()
    assert await cache.get_rates() == rate_snapshot


@pytest.mark.asyncio
async def test_second_call_within_ttl_uses_cache(provider):
    service = RateService(provider=provider, cache=InMemoryCacheService(ttl_seconds=3600))

    first = await service.get_snapshot()
    second = await service.get_snapshot()

    assert first is second
    assert provider.fetch_rates.await_count == 1


@pytest.mark.asyncio
async def test_expired_cache_triggers_refetch(provider):
    clock = FakeClock()
    service = RateService(provider=provider, cache=InMemoryCacheService(ttl_seconds=60, clock=clock))

    await service.get_snapshot()
    clock.now = 59
    await service.get_snapshot()
    assert provider.fetch_rates.await_count == 1

    clock.now = 60
    await service.get_snapshot()
    assert provider.fetch_rates.await_count == 2


@pytest.mark.asyncio
async def test_cache_read_error_falls_back_to_provider(provider, rate_snapshot):
    cache = AsyncMock()
    cache.get_rates.side_effect = CacheError('Redis read failed: ConnectionError')

    service = RateService(provider=provider, cache=cache)
    snapshot = await service.get_snapshot()

    assert snapshot == rate_snapshot
    provider.fetch_rates.assert_awaited_once()
    cache.set_rates.assert_awaited_once_with(rate_snapshot)


@pytest.mark.asyncio
async def test_cache_write_error_still_returns_snapshot(provider, rate_snapshot):
    cache = AsyncMock()
    cache.get_rates.return_value = None
    cache.set_rates.side_effect = CacheError('Redis write failed: TimeoutError')

    service = RateService(provider=provider, cache=cache)

    assert await service.get_snapshot() == rate_snapshot


@pytest.mark.asyncio
async def test_provider_errors_are_not_retried(provider):
    provider.fetch_rates.side_effect = RuntimeError('boom')
    service = RateService(provider=provider, cache=InMemoryCacheService())

    with pytest.raises(RuntimeError):
        await service.get_snapshot()

    assert provider.fetch_rates.await_count == 1


@pytest.mark.asyncio
async def test_empty_snapshot_is_still_cached(provider):
    provider.fetch_rates.return_value = RateSnapshot([])
    cache = InMemoryCacheService()
    service = RateService(provider=provider, cache=cache)

    await service.get_snapshot()
    await service.get_snapshot()

    assert provider.fetch_rates.await_count == 1
