import logging
from collections.abc import Callable
from decimal import Decimal

from domain.exceptions.currency import ExchangeRateNotFoundError
from domain.models.currency import RateSnapshot, ResolutionStrategy, ResolvedRate
from domain.services.rate_lookup import RateLookupTable

logger = logging.getLogger(__name__)

UAH_CODE = 980
ONE = Decimal(1)


def _first_rate(*candidates: Callable[[], Decimal | None]) -> Decimal | None:
	for candidate in candidates:
		rate = candidate()
		if rate:
			return rate
	return None


def _invert(rate: Decimal | None) -> Decimal | None:
	return ONE / rate if rate else None


class RateResolver:
	"""Turns a pair of ISO-4217 numeric codes into a single conversion rate.

	Strategies are tried in order and the first one that yields a rate wins:
	identity, direct quote, inverse quote, then a cross through the base
	currency (UAH). Quotes of zero count as missing.
	"""

	def __init__(self, snapshot: RateSnapshot, base_code: int = UAH_CODE):
		self.table = RateLookupTable(snapshot)
		self.base_code = base_code

	def resolve(self, from_code: int, to_code: int) -> ResolvedRate:
		strategies: list[tuple[ResolutionStrategy, Callable[[int, int], Decimal | None]]] = [
			(ResolutionStrategy.IDENTITY, self._identity),
			(ResolutionStrategy.DIRECT, self._direct),
			(ResolutionStrategy.INVERSE, self._inverse),
			(ResolutionStrategy.INTERMEDIATED, self._intermediated),
		]

		for strategy, attempt in strategies:
			rate = attempt(from_code, to_code)
			if rate:
				logger.info(
					f'Using {strategy.value} rate from {from_code} to {to_code}: {rate}',
					extra={
						'extra_data': {
							'from_code': from_code,
							'to_code': to_code,
							'rate': rate,
							'strategy': strategy.value,
						}
					},
				)
				return ResolvedRate(
					from_code=from_code, to_code=to_code, rate=rate, strategy=strategy
				)

		logger.error(f'Exchange rate not found for codes {from_code} to {to_code}')
		raise ExchangeRateNotFoundError(from_code, to_code)

	def _identity(self, from_code: int, to_code: int) -> Decimal | None:
		return ONE if from_code == to_code else None

	def _direct(self, from_code: int, to_code: int) -> Decimal | None:
		record = self.table.find_direct(from_code, to_code)
		if record is None:
			return None

		# Quotes from the base currency are expressed per unit of foreign currency
		from_base = from_code == self.base_code
		return _first_rate(
			lambda: record.rate_cross,
			lambda: _invert(record.rate_sell) if from_base else None,
			lambda: _invert(record.rate_buy) if from_base else None,
			lambda: record.rate_buy,
			lambda: record.rate_sell,
		)

	def _inverse(self, from_code: int, to_code: int) -> Decimal | None:
		record = self.table.find_inverse(from_code, to_code)
		if record is None:
			return None

		to_base = to_code == self.base_code
		return _first_rate(
			lambda: _invert(record.rate_cross),
			lambda: record.rate_buy if to_base else None,
			lambda: record.rate_sell if to_base else None,
			lambda: _invert(record.rate_sell),
			lambda: _invert(record.rate_buy),
		)

	def _intermediated(self, from_code: int, to_code: int) -> Decimal | None:
		from_leg = self.table.find_to_base(from_code, self.base_code)
		to_leg = self.table.find_to_base(to_code, self.base_code)
		if from_leg is None or to_leg is None:
			return None

		# Selling into the base currency, then buying out of it
		from_rate = from_leg.rate_cross or from_leg.rate_buy or from_leg.rate_sell
		to_rate = to_leg.rate_cross or to_leg.rate_sell or to_leg.rate_buy
		if not from_rate or not to_rate:
			return None

		return from_rate * (ONE / to_rate)
