import logging

from domain.exceptions.currency import InvalidCurrencyError
from infrastructure.currency_codes import numeric_code

logger = logging.getLogger(__name__)


class CurrencyService:
	def get_numeric_code(self, code: str) -> int:
		numeric = numeric_code(code)
		if numeric is None:
			logger.error(f'Invalid ISO currency code: {code}')
			raise InvalidCurrencyError(f'Invalid ISO currency code: {code}')
		return numeric
