from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from infrastructure.currency_codes import is_valid_code


class ConversionRequest(BaseModel):
	from_currency: str = Field(..., alias='from', description='Source ISO 4217 currency code')
	to_currency: str = Field(..., alias='to', description='Target ISO 4217 currency code')
	amount: float = Field(..., gt=0, strict=True, allow_inf_nan=False, description='Amount to convert')

	model_config = ConfigDict(
		populate_by_name=True,
		json_schema_extra={'example': {'from': 'USD', 'to': 'EUR', 'amount': 100}},
	)

	@field_validator('from_currency', 'to_currency')
	@classmethod
	def iso_currency_code(cls, v: str):
		v = v.strip().upper()
		if not v:
			raise PydanticCustomError('empty_value', 'should not be empty')
		if not is_valid_code(v):
			raise PydanticCustomError('iso4217', 'must be a valid ISO4217 currency code')
		return v
