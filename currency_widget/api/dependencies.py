import logging
from typing import Annotated

from fastapi import Depends, Request
from tenacity import (
	AsyncRetrying,
	retry_if_exception_type,
	stop_after_attempt,
	wait_exponential,
)

from currency_widget.application.services import RateStore
from currency_widget.config.settings import Settings, get_settings
from currency_widget.domain.exceptions.currency import FetchError, NetworkError, RatesUnavailableError
from currency_widget.domain.models.currency import RateSnapshot
from currency_widget.infrastructure.providers import FrankfurterProvider

logger = logging.getLogger(__name__)


def build_rate_store(settings: Settings) -> RateStore:
	provider = FrankfurterProvider(url=settings.RATE_API_URL, timeout=settings.REQUEST_TIMEOUT)
	return RateStore(provider)


async def bootstrap(store: RateStore, settings: Settings) -> RateSnapshot | None:
	"""Load the first snapshot, retrying transport failures. The app starts without rates on failure."""
	logger.info(f'Loading initial rates (base {settings.DEFAULT_PIVOT})...')
	try:
		async for attempt in AsyncRetrying(
			stop=stop_after_attempt(settings.STARTUP_REFRESH_ATTEMPTS),
			wait=wait_exponential(
				multiplier=settings.STARTUP_RETRY_WAIT_SECONDS,
				min=settings.STARTUP_RETRY_WAIT_SECONDS,
				max=10,
			),
			retry=retry_if_exception_type(NetworkError),
			reraise=True,
		):
			with attempt:
				snapshot = await store.refresh(settings.DEFAULT_PIVOT)
	except FetchError as e:
		logger.error(f'Initial rate load failed: {e}')
		return None

	logger.info(f'Loaded {len(snapshot.rates)} rates')
	return snapshot


def get_rate_store(request: Request) -> RateStore:
	store = getattr(request.app.state, 'rate_store', None)
	if store is None:
		raise RuntimeError('Rate store not initialized')
	return store


def get_snapshot(store: Annotated[RateStore, Depends(get_rate_store)]) -> RateSnapshot:
	snapshot = store.current()
	if snapshot is None:
		raise RatesUnavailableError('Exchange rates have not been loaded yet')
	return snapshot


def get_app_settings() -> Settings:
	return get_settings()
