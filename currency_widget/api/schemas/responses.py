from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ConversionResponse(BaseModel):
	from_currency: str = Field(..., description='Source currency code')
	to_currency: str = Field(..., description='Target currency code')
	from_name: str = Field(..., description='Display name of the source currency')
	to_name: str = Field(..., description='Display name of the target currency')
	amount: float = Field(..., description='Original amount requested')
	converted_amount: float = Field(..., description='Converted amount, full precision')
	exchange_rate: float = Field(..., description='converted_amount / amount')
	formatted_amount: str = Field(..., description='Converted amount rounded for display')
	formatted_rate: str = Field(..., description='Exchange rate rounded for display')
	pivot: str = Field(..., description='Currency the rates are quoted against')
	timestamp: datetime = Field(..., description='When the rates were fetched')
	stale: bool = Field(..., description='Rates are older than the configured maximum age')

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'from_currency': 'EUR',
				'to_currency': 'JPY',
				'from_name': 'Euro',
				'to_name': 'Japanese Yen',
				'amount': 100.0,
				'converted_amount': 16666.666666666668,
				'exchange_rate': 166.66666666666669,
				'formatted_amount': '16,666.6667',
				'formatted_rate': '166.6667',
				'pivot': 'USD',
				'timestamp': '2025-09-27T10:30:00Z',
				'stale': False,
			}
		}
	)


class RatesResponse(BaseModel):
	pivot: str = Field(..., description='Currency the rates are quoted against')
	rates: dict[str, float | None] = Field(..., description='1 pivot = rates[code] units of code')
	fetched_at: datetime = Field(..., description='When the rates were fetched')
	age_seconds: float = Field(..., description='Seconds since the rates were fetched')
	stale: bool = Field(..., description='Rates are older than the configured maximum age')


class ReferenceRateItem(BaseModel):
	pair: str = Field(..., description='BASE/TARGET')
	rate: float
	formatted_rate: str


class ReferenceRatesResponse(BaseModel):
	base_currency: str
	rates: list[ReferenceRateItem]
	fetched_at: datetime
	stale: bool


class CurrencyInfo(BaseModel):
	code: str
	name: str


class SupportedCurrenciesResponse(BaseModel):
	currencies: list[CurrencyInfo] = Field(description='Currencies usable for conversion')

	model_config = ConfigDict(
		json_schema_extra={'examples': [{'currencies': [{'code': 'EUR', 'name': 'Euro'}]}]}
	)


class HealthResponse(BaseModel):
	status: str = Field(..., description='healthy or degraded')
	timestamp: datetime
	pivot: str | None = None
	fetched_at: datetime | None = None
	stale: bool
