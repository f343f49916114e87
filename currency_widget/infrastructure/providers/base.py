from abc import ABC, abstractmethod


class ExchangeRateProvider(ABC):
	"""Source of latest rates quoted against a single base currency."""

	@property
	@abstractmethod
	def name(self) -> str: ...

	@abstractmethod
	async def fetch_latest(self, base: str) -> dict[str, float]:
		"""Return `{code: rate}` for 1 unit of `base`. Raises FetchError subclasses."""

	@abstractmethod
	async def close(self) -> None: ...
