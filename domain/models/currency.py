from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any


def _to_rate(value: Any) -> Decimal | None:
	# Monobank omits fields it does not quote
	if value is None:
		return None
	return Decimal(str(value))


@dataclass(frozen=True)
class RateRecord:
	"""One Monobank quote from currency A to currency B.

	Rates are kept exactly as quoted, zero included; the resolver treats a
	zero rate as missing.
	"""

	currency_code_a: int
	currency_code_b: int
	date: int = 0
	rate_buy: Decimal | None = None
	rate_sell: Decimal | None = None
	rate_cross: Decimal | None = None

	@classmethod
	def from_dict(cls, data: dict[str, Any]) -> 'RateRecord':
		return cls(
			currency_code_a=int(data['currencyCodeA']),
			currency_code_b=int(data['currencyCodeB']),
			date=int(data.get('date') or 0),
			rate_buy=_to_rate(data.get('rateBuy')),
			rate_sell=_to_rate(data.get('rateSell')),
			rate_cross=_to_rate(data.get('rateCross')),
		)

	def to_dict(self) -> dict[str, Any]:
		"""Monobank wire form, with rates as JSON numbers."""
		data: dict[str, Any] = {
			'currencyCodeA': self.currency_code_a,
			'currencyCodeB': self.currency_code_b,
			'date': self.date,
		}
		for key, value in (
			('rateBuy', self.rate_buy),
			('rateSell', self.rate_sell),
			('rateCross', self.rate_cross),
		):
			if value is not None:
				data[key] = float(value)
		return data


class RateSnapshot:
	"""Immutable, ordered set of rate records fetched in one refresh cycle."""

	__slots__ = ('_records',)

	def __init__(self, records: Iterable[RateRecord]):
		self._records = tuple(records)

	@classmethod
	def from_list(cls, data: list[dict[str, Any]]) -> 'RateSnapshot':
		return cls(RateRecord.from_dict(item) for item in data)

	def to_list(self) -> list[dict[str, Any]]:
		return [record.to_dict() for record in self._records]

	@property
	def records(self) -> tuple[RateRecord, ...]:
		return self._records

	def __iter__(self) -> Iterator[RateRecord]:
		return iter(self._records)

	def __len__(self) -> int:
		return len(self._records)

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, RateSnapshot):
			return NotImplemented
		return self._records == other._records

	def __hash__(self) -> int:
		return hash(self._records)

	def __repr__(self) -> str:
		return f'RateSnapshot({len(self._records)} records)'


class ResolutionStrategy(Enum):
	IDENTITY = 'identity'
	DIRECT = 'direct'
	INVERSE = 'inverse'
	INTERMEDIATED = 'intermediated'


@dataclass(frozen=True)
class ResolvedRate:
	from_code: int
	to_code: int
	rate: Decimal
	strategy: ResolutionStrategy


@dataclass(frozen=True)
class ConversionResult:
	from_currency: str
	to_currency: str
	amount: Decimal
	converted_amount: Decimal
	rate: Decimal
	strategy: ResolutionStrategy
