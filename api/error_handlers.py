import logging
from datetime import UTC, datetime
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from domain.exceptions.currency import (
	ExchangeRateNotFoundError,
	InvalidAmountError,
	InvalidCurrencyError,
	ProviderError,
)

logger = logging.getLogger(__name__)

NUMBER_MESSAGE = 'must be a number conforming to the specified constraints'

VALIDATION_MESSAGES = {
	'missing': 'should not be empty',
	'greater_than': 'must be a positive number',
	'float_type': NUMBER_MESSAGE,
	'float_parsing': NUMBER_MESSAGE,
	'finite_number': NUMBER_MESSAGE,
	'string_type': 'must be a string',
	'model_attributes_type': 'must be a JSON object',
}


def error_response(
	request: Request,
	status_code: int,
	message: str | list[str],
	errors: list[dict[str, Any]] | None = None,
) -> JSONResponse:
	return JSONResponse(
		status_code=status_code,
		content={
			'success': False,
			'statusCode': status_code,
			'message': message,
			'errors': errors,
			'timestamp': datetime.now(UTC).isoformat(),
			'path': request.url.path,
		},
	)


def _describe_validation_error(error: dict[str, Any]) -> dict[str, str]:
	loc = [str(part) for part in error.get('loc', ()) if part != 'body']
	field = '.'.join(loc) or 'body'

	if error['type'] == 'json_invalid':
		reason = error.get('ctx', {}).get('error', error['msg'])
		return {'field': 'body', 'message': f'Malformed JSON body: {reason}'}

	phrase = VALIDATION_MESSAGES.get(error['type'], error['msg'])
	return {'field': field, 'message': f'{field} {phrase}'}


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(RequestValidationError)
	async def validation_error_handler(request: Request, exc: RequestValidationError):
		errors = [_describe_validation_error(error) for error in exc.errors()]
		logger.warning(f'Validation error on {request.url.path}: {errors}')
		return error_response(
			request,
			status.HTTP_400_BAD_REQUEST,
			[error['message'] for error in errors],
			errors,
		)

	@app.exception_handler(StarletteHTTPException)
	async def http_exception_handler(request: Request, exc: StarletteHTTPException):
		# Unsupported methods on a known path are reported like unknown routes
		if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
			return error_response(
				request,
				status.HTTP_404_NOT_FOUND,
				f'Cannot {request.method} {request.url.path}',
			)
		return error_response(request, exc.status_code, str(exc.detail))

	@app.exception_handler(InvalidCurrencyError)
	@app.exception_handler(InvalidAmountError)
	@app.exception_handler(ExchangeRateNotFoundError)
	async def bad_request_handler(request: Request, exc: Exception):
		return error_response(request, status.HTTP_400_BAD_REQUEST, str(exc))

	@app.exception_handler(ProviderError)
	async def provider_error_handler(request: Request, exc: ProviderError):
		logger.error(f'Provider error: {exc}')
		return error_response(
			request,
			status.HTTP_503_SERVICE_UNAVAILABLE,
			'Exchange rate service unavailable',
		)

	@app.exception_handler(Exception)
	async def global_exception_handler(request: Request, exc: Exception):
		logger.error(f'Unhandled exception: {exc}', exc_info=True)
		return error_response(
			request,
			status.HTTP_500_INTERNAL_SERVER_ERROR,
			'Internal server error',
		)
