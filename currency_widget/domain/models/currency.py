import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from types import MappingProxyType

# Currencies offered by the widget's selectors
CURRENCY_NAMES: Mapping[str, str] = MappingProxyType({
	'USD': 'US Dollar',
	'EUR': 'Euro',
	'JPY': 'Japanese Yen',
	'GBP': 'British Pound',
	'CNY': 'Chinese Yuan',
	'CAD': 'Canadian Dollar',
	'AUD': 'Australian Dollar',
	'CHF': 'Swiss Franc',
	'HKD': 'Hong Kong Dollar',
	'SGD': 'Singapore Dollar',
})


def currency_name(code: str) -> str:
	return CURRENCY_NAMES.get(code, code)


def is_usable_rate(value: float) -> bool:
	return math.isfinite(value) and value > 0


@dataclass(frozen=True)
class RateSnapshot:
	"""Rates quoted against `pivot`: 1 pivot = rates[code] units of code."""

	pivot: str
	rates: Mapping[str, float]
	fetched_at: datetime = field(default_factory=lambda: datetime.now(UTC))

	def __post_init__(self):
		object.__setattr__(self, 'rates', MappingProxyType(dict(self.rates)))

	def age(self, now: datetime | None = None) -> timedelta:
		return (now or datetime.now(UTC)) - self.fetched_at

	def usable_currencies(self) -> list[str]:
		return sorted(code for code, rate in self.rates.items() if is_usable_rate(rate))


@dataclass(frozen=True)
class ConversionResult:
	from_currency: str
	to_currency: str
	amount_in: float
	amount_out: float
	rate: float  # amount_out / amount_in


@dataclass(frozen=True)
class ReferenceRate:
	base_currency: str
	target_currency: str
	rate: float
