import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from api.dependencies import cleanup_dependencies, init_dependencies
from api.error_handlers import register_exception_handlers
from api.routes import currency
from config.settings import NodeEnvironment, get_settings
from infrastructure.monitoring.logger import configure_logging

settings = get_settings()

configure_logging(settings.NODE_ENV)
logger = logging.getLogger(__name__)
request_logger = logging.getLogger('api.requests')


@asynccontextmanager
async def lifespan(app: FastAPI):
	logger.info('Starting Currency Converter API...')

	init_dependencies()

	logger.info('Application ready')

	yield

	logger.info('Shutting down...')
	await cleanup_dependencies()


app = FastAPI(
	title=settings.APP_NAME,
	description='API for converting currencies using Monobank exchange rates',
	version='1.0.0',
	lifespan=lifespan,
	docs_url='/api',
	redoc_url=None,
)

app.add_middleware(
	CORSMiddleware,
	allow_origins=['*'],
	allow_methods=['*'],
	allow_headers=['*'],
)


@app.middleware('http')
async def log_requests(request: Request, call_next):
	start_time = time.perf_counter()
	response = await call_next(request)
	duration_ms = (time.perf_counter() - start_time) * 1000
	request_logger.info(
		f'{request.method} {request.url.path} {response.status_code} ({duration_ms:.2f}ms)'
	)
	return response


app.include_router(currency.router)
register_exception_handlers(app)


def run() -> None:
	import uvicorn

	logger.info(f'Starting server on {settings.HOST}:{settings.NODE_PORT}')

	uvicorn.run(
		'api.main:app',
		host=settings.HOST,
		port=settings.NODE_PORT,
		reload=settings.NODE_ENV is NodeEnvironment.DEVELOPMENT,
		log_level='debug' if settings.NODE_ENV is NodeEnvironment.DEVELOPMENT else 'warning',
	)


if __name__ == '__main__':
	run()
