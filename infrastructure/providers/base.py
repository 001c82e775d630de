from typing import Protocol

from domain.models.currency import RateSnapshot


class ExchangeRateProvider(Protocol):
	@property
	def name(self) -> str:
		...

	async def fetch_rates(self) -> RateSnapshot:
		...

	async def close(self) -> None:
		...
