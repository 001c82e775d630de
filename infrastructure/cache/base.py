from typing import Protocol

from domain.models.currency import RateSnapshot

RATES_CACHE_KEY = 'exchangeRates'


class RateCache(Protocol):
	async def get_rates(self) -> RateSnapshot | None:
		...

	async def set_rates(self, snapshot: RateSnapshot) -> None:
		...

	async def close(self) -> None:
		...
