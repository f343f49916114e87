class CurrencyException(Exception):
	pass


class FetchError(CurrencyException):
	"""Refreshing the rate snapshot failed. The previous snapshot stays valid."""


class NetworkError(FetchError):
	pass


class HttpStatusError(FetchError):
	def __init__(self, status_code: int, message: str | None = None):
		self.status_code = status_code
		super().__init__(message or f'Rate API responded with HTTP {status_code}')


class MalformedResponseError(FetchError):
	pass


class ConversionError(CurrencyException):
	pass


class InvalidAmountError(ConversionError):
	def __init__(self, amount: float):
		self.amount = amount
		super().__init__(f'Amount must be a positive finite number, got {amount!r}')


class ConversionRangeError(ConversionError):
	def __init__(self, amount: float, amount_out: float):
		self.amount = amount
		self.amount_out = amount_out
		super().__init__(
			f'Converting {amount!r} gives {amount_out!r}, outside the representable range'
		)


class UnknownCurrencyError(ConversionError):
	def __init__(self, code: str, message: str | None = None):
		self.code = code
		super().__init__(message or f'Currency {code} is not present in the current rates')


class UnusableRateError(UnknownCurrencyError):
	def __init__(self, code: str, rate: float):
		self.rate = rate
		super().__init__(code, f'Currency {code} has an unusable rate: {rate!r}')


class RatesUnavailableError(CurrencyException):
	pass
