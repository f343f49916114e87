import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from currency_widget.api.dependencies import bootstrap, build_rate_store
from currency_widget.api.error_handlers import register_exception_handlers
from currency_widget.api.routes import convert, currencies, health, rates
from currency_widget.config.settings import Settings, get_settings
from currency_widget.monitoring.logger import configure_logging, get_production_logger


def create_app(settings: Settings | None = None) -> FastAPI:
	settings = settings or get_settings()
	production_logger = get_production_logger()

	@asynccontextmanager
	async def lifespan(app: FastAPI):
		configure_logging(
			level='DEBUG' if settings.DEBUG else settings.LOG_LEVEL,
			log_directory=settings.LOG_DIRECTORY,
			log_to_file=settings.LOG_TO_FILE,
		)
		production_logger.log_lifecycle(f'Starting {settings.APP_NAME}', settings.APP_NAME)

		app.state.rate_store = build_rate_store(settings)
		await bootstrap(app.state.rate_store, settings)

		production_logger.log_lifecycle('Application ready', settings.APP_NAME)

		yield

		production_logger.log_lifecycle('Shutting down', settings.APP_NAME)
		await app.state.rate_store.close()
		production_logger.log_lifecycle('Shutdown complete', settings.APP_NAME)

	app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

	app.add_middleware(
		CORSMiddleware,
		allow_origins=['*'],
		allow_methods=['GET', 'POST'],
		allow_headers=['*'],
	)

	@app.middleware('http')
	async def log_requests(request: Request, call_next):
		start_time = time.perf_counter()
		try:
			response = await call_next(request)
		except Exception as e:
			production_logger.log_user_request(
				endpoint=request.url.path,
				request_data=dict(request.query_params),
				success=False,
				response_time_ms=(time.perf_counter() - start_time) * 1000,
				error_message=f'{e.__class__.__name__}: {e}',
			)
			raise
		production_logger.log_user_request(
			endpoint=request.url.path,
			request_data=dict(request.query_params),
			success=response.status_code < 400,
			response_time_ms=(time.perf_counter() - start_time) * 1000,
			error_message=None if response.status_code < 400 else f'HTTP {response.status_code}',
		)
		return response

	app.include_router(convert.router)
	app.include_router(rates.router)
	app.include_router(currencies.router)
	app.include_router(health.router)
	register_exception_handlers(app)

	return app


app = create_app()


if __name__ == '__main__':
	import uvicorn

	uvicorn.run('currency_widget.api.main:app', host='0.0.0.0', port=8000)
