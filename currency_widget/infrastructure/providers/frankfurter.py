import httpx

from currency_widget.domain.exceptions.currency import (
	HttpStatusError,
	MalformedResponseError,
	NetworkError,
)

from .base import ExchangeRateProvider


class FrankfurterProvider(ExchangeRateProvider):
	BASE_URL = 'https://api.frankfurter.app/latest'

	def __init__(
		self,
		url: str | None = None,
		client: httpx.AsyncClient | None = None,
		timeout: float = 10,
	):
		self.url = url or self.BASE_URL
		self._client = client or httpx.AsyncClient(
			timeout=httpx.Timeout(timeout),
			headers={'accept': 'application/json'},
			follow_redirects=True,
		)

	@property
	def name(self) -> str:
		return 'frankfurter'

	async def _request(self, params: dict) -> dict:
		try:
			response = await self._client.get(self.url, params=params)
			response.raise_for_status()
		except httpx.HTTPStatusError as e:
			raise HttpStatusError(
				e.response.status_code,
				f'Frankfurter HTTP error {e.response.status_code}',
			) from e
		except httpx.RequestError as e:
			raise NetworkError(f'Frankfurter request failed: {e.__class__.__name__}') from e

		try:
			data = response.json()
		except ValueError as e:
			raise MalformedResponseError(f'Frankfurter returned invalid JSON: {e}') from e

		if not isinstance(data, dict):
			raise MalformedResponseError('Frankfurter response is not a JSON object')
		return data

	async def fetch_latest(self, base: str) -> dict[str, float]:
		data = await self._request({'base': base})
		return self._parse_rates(data)

	@staticmethod
	def _parse_rates(data: dict) -> dict[str, float]:
		rates = data.get('rates')
		if not isinstance(rates, dict):
			raise MalformedResponseError("Response has no 'rates' object")

		parsed: dict[str, float] = {}
		for code, value in rates.items():
			# bool is an int subclass but never a valid rate
			if not isinstance(code, str) or isinstance(value, bool) or not isinstance(value, int | float):
				raise MalformedResponseError(f'Non-numeric rate for {code!r}: {value!r}')
			parsed[code] = float(value)
		return parsed

	async def close(self) -> None:
		await self._client.aclose()
