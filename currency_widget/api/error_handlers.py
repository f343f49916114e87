import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from currency_widget.domain.exceptions.currency import (
	ConversionRangeError,
	FetchError,
	InvalidAmountError,
	NetworkError,
	RatesUnavailableError,
	UnknownCurrencyError,
)

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(InvalidAmountError)
	async def invalid_amount_handler(request: Request, exc: InvalidAmountError):
		return JSONResponse(status_code=400, content={'detail': str(exc)})

	@app.exception_handler(ConversionRangeError)
	async def conversion_range_handler(request: Request, exc: ConversionRangeError):
		return JSONResponse(status_code=422, content={'detail': str(exc)})

	@app.exception_handler(UnknownCurrencyError)
	async def unknown_currency_handler(request: Request, exc: UnknownCurrencyError):
		return JSONResponse(status_code=404, content={'detail': str(exc), 'currency': exc.code})

	@app.exception_handler(RatesUnavailableError)
	async def rates_unavailable_handler(request: Request, exc: RatesUnavailableError):
		return JSONResponse(status_code=503, content={'detail': str(exc)})

	@app.exception_handler(FetchError)
	async def fetch_error_handler(request: Request, exc: FetchError):
		logger.error(f'Rate refresh failed: {exc}')
		status_code = 504 if isinstance(exc, NetworkError) else 502
		return JSONResponse(
			status_code=status_code, content={'detail': 'Exchange rate service unavailable'}
		)

	@app.exception_handler(Exception)
	async def global_exception_handler(request: Request, exc: Exception):
		logger.error(f'Unhandled exception: {exc}', exc_info=True)
		return JSONResponse(status_code=500, content={'detail': 'Internal server error'})
