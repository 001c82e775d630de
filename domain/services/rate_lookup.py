from domain.models.currency import RateRecord, RateSnapshot


class RateLookupTable:
	"""Directional lookups over a rate snapshot.

	Every query returns the first matching record in snapshot order; records
	for the same pair are never merged.
	"""

	def __init__(self, snapshot: RateSnapshot):
		self._snapshot = snapshot

	def _first(self, code_a: int, code_b: int) -> RateRecord | None:
		return next(
			(
				record
				for record in self._snapshot
				if record.currency_code_a == code_a and record.currency_code_b == code_b
			),
			None,
		)

	def find_direct(self, from_code: int, to_code: int) -> RateRecord | None:
		return self._first(from_code, to_code)

	def find_inverse(self, from_code: int, to_code: int) -> RateRecord | None:
		return self._first(to_code, from_code)

	def find_to_base(self, code: int, base_code: int) -> RateRecord | None:
		return self._first(code, base_code)
