import time
from datetime import UTC, datetime, timedelta

from currency_widget.domain.exceptions.currency import FetchError
from currency_widget.domain.models.currency import RateSnapshot
from currency_widget.infrastructure.providers.base import ExchangeRateProvider
from currency_widget.monitoring.logger import get_production_logger


class RateStore:
	"""
	Holds the single current RateSnapshot and mediates all rate fetching.

	A refresh publishes a new snapshot only after the fetch has fully succeeded,
	by swapping one reference, so readers of `current()` see either the old
	snapshot or the new one. Overlapping refreshes are not serialized: the last
	one to complete wins.
	"""

	def __init__(self, provider: ExchangeRateProvider):
		self.provider = provider
		self._snapshot: RateSnapshot | None = None
		self.production_logger = get_production_logger()

	def current(self) -> RateSnapshot | None:
		return self._snapshot

	async def refresh(self, pivot: str) -> RateSnapshot:
		pivot = pivot.upper()
		start_time = time.perf_counter()
		try:
			rates = await self.provider.fetch_latest(pivot)
		except FetchError as e:
			self.production_logger.log_rate_fetch(
				provider_name=self.provider.name,
				pivot=pivot,
				success=False,
				response_time_ms=(time.perf_counter() - start_time) * 1000,
				error_message=str(e),
			)
			raise

		# The API omits the base currency's own rate
		rates = dict(rates)
		rates[pivot] = 1.0
		snapshot = RateSnapshot(pivot=pivot, rates=rates, fetched_at=datetime.now(UTC))

		self._snapshot = snapshot

		self.production_logger.log_rate_fetch(
			provider_name=self.provider.name,
			pivot=pivot,
			success=True,
			response_time_ms=(time.perf_counter() - start_time) * 1000,
			rate_count=len(rates),
		)
		return snapshot

	def is_stale(self, max_age: timedelta, now: datetime | None = None) -> bool:
		snapshot = self._snapshot
		if snapshot is None:
			return True
		return snapshot.age(now) > max_age

	async def close(self) -> None:
		await self.provider.close()
