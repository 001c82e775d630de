import logging

from domain.exceptions.currency import CacheError
from domain.models.currency import RateSnapshot
from infrastructure.cache.base import RATES_CACHE_KEY, RateCache
from infrastructure.providers.base import ExchangeRateProvider

logger = logging.getLogger(__name__)


class RateService:
    """Read-through access to the current rate snapshot.

    Concurrent cache misses may each hit the provider; the snapshot is
    idempotent within a TTL window so the last write wins harmlessly.
    Provider failures are not retried here.
    """

    def __init__(self, provider: ExchangeRateProvider, cache: RateCache):
        self.provider = provider
        self.cache = cache

    async def get_snapshot(self) -> RateSnapshot:
        cached = await self._read_cache()
        if cached is not None:
            logger.info("Using cached exchange rates.")
            return cached

        logger.info(
            f"Exchange rates not found in cache. Fetching from {self.provider.name}."
        )
        snapshot = await self.provider.fetch_rates()
        await self._write_cache(snapshot)
        return snapshot

    async def _read_cache(self) -> RateSnapshot | None:
        try:
            return await self.cache.get_rates()
        except CacheError as e:
            logger.warning(f"Cache read for {RATES_CACHE_KEY} failed, refetching: {e}")
            return None

    async def _write_cache(self, snapshot: RateSnapshot) -> None:
        try:
            await self.cache.set_rates(snapshot)
        except CacheError as e:
            logger.warning(f"Cache write for {RATES_CACHE_KEY} failed: {e}")
