from .requests import ConversionRequest
from .responses import ConversionResponse, ErrorResponse

__all__ = [
	'ConversionRequest',
	'ConversionResponse',
	'ErrorResponse',
]
