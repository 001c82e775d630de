class CurrencyException(Exception):
	pass


class InvalidCurrencyError(CurrencyException):
	pass


class InvalidAmountError(CurrencyException):
	pass


class ExchangeRateNotFoundError(CurrencyException):
	def __init__(self, from_code: int, to_code: int):
		self.from_code = from_code
		self.to_code = to_code
		super().__init__(f'Exchange rate not found for codes {from_code} to {to_code}')


class ProviderError(CurrencyException):
	pass


class CacheError(CurrencyException):
	pass
