import pycountry


def numeric_code(alpha_code: str) -> int | None:
	"""Return the ISO-4217 numeric code for an alpha-3 code, or None if unknown."""
	if not alpha_code or len(alpha_code) != 3:
		return None

	currency = pycountry.currencies.get(alpha_3=alpha_code.upper())
	if currency is None:
		return None
	return int(currency.numeric)


def is_valid_code(alpha_code: str) -> bool:
	return numeric_code(alpha_code) is not None
