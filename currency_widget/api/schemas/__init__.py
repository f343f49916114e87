from .responses import (
	ConversionResponse,
	CurrencyInfo,
	HealthResponse,
	RatesResponse,
	ReferenceRateItem,
	ReferenceRatesResponse,
	SupportedCurrenciesResponse,
)

__all__ = [
	'ConversionResponse',
	'CurrencyInfo',
	'HealthResponse',
	'RatesResponse',
	'ReferenceRateItem',
	'ReferenceRatesResponse',
	'SupportedCurrenciesResponse',
]
