from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ConversionResponse(BaseModel):
	from_currency: str = Field(..., alias='from', description='Source currency code (ISO 4217)')
	to_currency: str = Field(..., alias='to', description='Target currency code (ISO 4217)')
	amount: float = Field(..., description='Amount to convert')
	converted_amount: float = Field(
		..., alias='convertedAmount', description='Converted amount in target currency'
	)

	model_config = ConfigDict(
		populate_by_name=True,
		json_schema_extra={
			'example': {'from': 'USD', 'to': 'EUR', 'amount': 100, 'convertedAmount': 85.5}
		},
	)


class ErrorResponse(BaseModel):
	success: bool = False
	status_code: int = Field(..., alias='statusCode')
	message: str | list[str]
	errors: list[dict[str, Any]] | None = None
	timestamp: str
	path: str

	model_config = ConfigDict(
		populate_by_name=True,
		json_schema_extra={
			'example': {
				'success': False,
				'statusCode': 400,
				'message': 'Exchange rate not found for codes 840 to 826',
				'errors': None,
				'timestamp': '2025-10-05T10:30:00+00:00',
				'path': '/v1/currency/convert',
			}
		},
	)
