import math
from collections.abc import Iterable

from currency_widget.domain.exceptions.currency import (
	ConversionRangeError,
	InvalidAmountError,
	UnknownCurrencyError,
	UnusableRateError,
)
from currency_widget.domain.models.currency import (
	ConversionResult,
	RateSnapshot,
	ReferenceRate,
	is_usable_rate,
)


def _rate_for(snapshot: RateSnapshot, code: str) -> float:
	try:
		rate = snapshot.rates[code]
	except KeyError as e:
		raise UnknownCurrencyError(code) from e
	if not is_usable_rate(rate):
		raise UnusableRateError(code, rate)
	return rate


def convert(
	amount: float, from_currency: str, to_currency: str, snapshot: RateSnapshot
) -> ConversionResult:
	"""
	Convert `amount` of `from_currency` into `to_currency`.

	Rates are quoted against the snapshot's pivot, so a pair that does not
	involve the pivot is triangulated: divide out the source rate to get pivot
	units, then multiply by the target rate.
	"""
	if isinstance(amount, bool) or not math.isfinite(amount) or amount <= 0:
		raise InvalidAmountError(amount)

	if from_currency == to_currency:
		return ConversionResult(
			from_currency=from_currency,
			to_currency=to_currency,
			amount_in=amount,
			amount_out=amount,
			rate=1.0,
		)

	from_rate = _rate_for(snapshot, from_currency)
	to_rate = _rate_for(snapshot, to_currency)

	if from_currency == snapshot.pivot:
		amount_out = amount * to_rate
	elif to_currency == snapshot.pivot:
		amount_out = amount / from_rate
	else:
		amount_out = (amount / from_rate) * to_rate

	# Extreme amounts or rate ratios overflow to inf or underflow to 0
	rate = amount_out / amount
	if not (math.isfinite(amount_out) and amount_out > 0 and math.isfinite(rate) and rate > 0):
		raise ConversionRangeError(amount, amount_out)

	return ConversionResult(
		from_currency=from_currency,
		to_currency=to_currency,
		amount_in=amount,
		amount_out=amount_out,
		rate=rate,
	)


def reference_rates(
	snapshot: RateSnapshot, base_currency: str, targets: Iterable[str]
) -> list[ReferenceRate]:
	"""Rates for 1 unit of `base_currency`, skipping the base itself and unusable targets."""
	table = []
	for target in targets:
		if target == base_currency:
			continue
		try:
			result = convert(1.0, base_currency, target, snapshot)
		except (UnknownCurrencyError, ConversionRangeError):
			continue
		table.append(ReferenceRate(base_currency=base_currency, target_currency=target, rate=result.rate))
	return table
