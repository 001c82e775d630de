import logging
from decimal import Decimal
from typing import Annotated

from fastapi import APIRouter, Depends, status

from api.dependencies import get_conversion_service
from api.schemas import ConversionRequest, ConversionResponse, ErrorResponse
from application.services import ConversionService

logger = logging.getLogger(__name__)

router = APIRouter(prefix='/v1/currency', tags=['Currency Conversion'])


@router.post(
	'/convert',
	response_model=ConversionResponse,
	status_code=status.HTTP_201_CREATED,
	responses={
		400: {'model': ErrorResponse, 'description': 'Invalid input data'},
		503: {'model': ErrorResponse, 'description': 'Exchange rate service unavailable'},
	},
	summary='Convert currency',
)
async def convert_currency(
	request: ConversionRequest,
	service: Annotated[ConversionService, Depends(get_conversion_service)],
) -> ConversionResponse:
	logger.info(
		f'Received conversion request: {request.amount} {request.from_currency} to {request.to_currency}'
	)

	result = await service.convert(
		request.from_currency, request.to_currency, Decimal(str(request.amount))
	)
	return ConversionResponse(
		from_currency=request.from_currency,
		to_currency=request.to_currency,
		amount=request.amount,
		converted_amount=result.converted_amount,
	)
