import logging
import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from application.services.currency_service import CurrencyService
from application.services.rate_service import RateService
from domain.exceptions.currency import InvalidAmountError
from domain.models.currency import ConversionResult
from domain.services.rate_resolver import RateResolver

logger = logging.getLogger(__name__)

CENTS = Decimal('0.01')


def to_cents(amount: Decimal, rate: Decimal) -> Decimal:
	"""Multiply and round half up to cents without losing integer digits."""
	with localcontext() as ctx:
		# Integer digits of the product plus the two decimal places
		ctx.prec += max(amount.adjusted(), 0) + max(rate.adjusted(), 0) + 4
		return (amount * rate).quantize(CENTS, rounding=ROUND_HALF_UP)


class ConversionService:
	def __init__(self, rate_service: RateService, currency_service: CurrencyService):
		self.rate_service = rate_service
		self.currency_service = currency_service

	async def convert(self, from_currency: str, to_currency: str, amount: Decimal) -> ConversionResult:
		logger.info(f'Converting {amount} {from_currency} to {to_currency}')

		if amount <= 0:
			logger.error('Amount must be greater than zero')
			raise InvalidAmountError('Amount must be greater than zero')

		from_code = self.currency_service.get_numeric_code(from_currency)
		to_code = self.currency_service.get_numeric_code(to_currency)

		snapshot = await self.rate_service.get_snapshot()
		resolved = RateResolver(snapshot).resolve(from_code, to_code)

		converted_amount = to_cents(amount, resolved.rate)
		if not math.isfinite(float(converted_amount)):
			logger.error(f'Converted amount {converted_amount} exceeds the JSON number range')
			raise InvalidAmountError('Amount is too large to convert')
		logger.info(f'Converted amount: {converted_amount} {to_currency}')

		return ConversionResult(
			from_currency=from_currency,
			to_currency=to_currency,
			amount=amount,
			converted_amount=converted_amount,
			rate=resolved.rate,
			strategy=resolved.strategy,
		)
