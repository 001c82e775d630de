import time
from collections.abc import Callable

from domain.models.currency import RateSnapshot
from infrastructure.cache.base import RATES_CACHE_KEY


class InMemoryCacheService:
	"""Process-local rate cache with per-entry expiry.

	Reads and writes never await, so each one is atomic on the event loop.
	"""

	def __init__(self, ttl_seconds: int = 3600, clock: Callable[[], float] = time.monotonic):
		self.ttl_seconds = ttl_seconds
		self._clock = clock
		self._entries: dict[str, tuple[float, RateSnapshot]] = {}

	async def get_rates(self) -> RateSnapshot | None:
		entry = self._entries.get(RATES_CACHE_KEY)
		if entry is None:
			return None

		expires_at, snapshot = entry
		if self._clock() >= expires_at:
			self._entries.pop(RATES_CACHE_KEY, None)
			return None
		return snapshot

	async def set_rates(self, snapshot: RateSnapshot) -> None:
		self._entries[RATES_CACHE_KEY] = (self._clock() + self.ttl_seconds, snapshot)

	async def close(self) -> None:
		self._entries.clear()
