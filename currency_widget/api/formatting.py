import math


def format_amount(value: float, min_digits: int = 2, max_digits: int = 4) -> str:
	"""Render with thousands separators and between min and max fractional digits."""
	if not math.isfinite(value):
		return str(value)
	text = f'{value:,.{max_digits}f}'
	if max_digits == 0:
		return text
	whole, fraction = text.split('.')
	fraction = fraction.rstrip('0').ljust(min_digits, '0')
	return f'{whole}.{fraction}' if fraction else whole


def format_rate(value: float) -> str:
	return f'{value:.4f}'
