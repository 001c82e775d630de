import logging

import httpx

from domain.exceptions.currency import ProviderError
from domain.models.currency import RateSnapshot

logger = logging.getLogger(__name__)


class MonobankProvider:
	def __init__(self, api_url: str, client: httpx.AsyncClient | None = None, timeout: float = 10):
		self.api_url = api_url
		self._client = client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))

	@property
	def name(self) -> str:
		return 'monobank'

	async def _request(self) -> list:
		try:
			response = await self._client.get(self.api_url)
			response.raise_for_status()
			data = response.json()
		except httpx.HTTPStatusError as e:
			raise ProviderError(
				f'Monobank HTTP error {e.response.status_code}: {e.response.text[:200]}'
			) from e
		except httpx.RequestError as e:
			raise ProviderError(f'Monobank request failed: {e.__class__.__name__}') from e
		except ValueError as e:
			raise ProviderError(f'Monobank response parsing error: {str(e)}') from e

		if isinstance(data, dict):
			info = data.get('errorDescription', 'Unknown error')
			raise ProviderError(f'Monobank API error: {info}')
		if not isinstance(data, list):
			raise ProviderError(f'Monobank returned unexpected payload: {type(data).__name__}')

		return data

	async def fetch_rates(self) -> RateSnapshot:
		data = await self._request()
		try:
			snapshot = RateSnapshot.from_list(data)
		except (KeyError, TypeError, ValueError, ArithmeticError) as e:
			raise ProviderError(f'Malformed rate record from Monobank: {e}') from e

		logger.info(f'Fetched {len(snapshot)} exchange rates from Monobank API')
		return snapshot

	async def close(self) -> None:
		await self._client.aclose()
