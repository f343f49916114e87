from datetime import UTC, datetime, timedelta
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status

from currency_widget.api.dependencies import get_app_settings, get_snapshot
from currency_widget.api.formatting import format_amount, format_rate
from currency_widget.api.schemas import ConversionResponse
from currency_widget.application.services import convert
from currency_widget.config.settings import Settings
from currency_widget.domain.exceptions.currency import ConversionError
from currency_widget.domain.models.currency import RateSnapshot, currency_name
from currency_widget.monitoring.logger import get_production_logger

router = APIRouter(prefix='/api', tags=['conversion'])

production_logger = get_production_logger()


@router.get(
	'/convert/{from_currency}/{to_currency}/{amount}',
	response_model=ConversionResponse,
	status_code=status.HTTP_200_OK,
	summary='Convert currency amount',
)
async def convert_currency(
	from_currency: Annotated[str, Path(min_length=3, max_length=3)],
	to_currency: Annotated[str, Path(min_length=3, max_length=3)],
	amount: float,
	snapshot: Annotated[RateSnapshot, Depends(get_snapshot)],
	settings: Annotated[Settings, Depends(get_app_settings)],
	swap: Annotated[bool, Query(description='Exchange source and target before converting')] = False,
) -> ConversionResponse:
	from_currency = from_currency.upper()
	to_currency = to_currency.upper()
	if swap:
		from_currency, to_currency = to_currency, from_currency

	try:
		result = convert(amount, from_currency, to_currency, snapshot)
	except ConversionError as e:
		production_logger.log_conversion(from_currency, to_currency, amount, success=False, error_message=str(e))
		raise
	production_logger.log_conversion(from_currency, to_currency, amount, success=True)

	return ConversionResponse(
		from_currency=result.from_currency,
		to_currency=result.to_currency,
		from_name=currency_name(result.from_currency),
		to_name=currency_name(result.to_currency),
		amount=result.amount_in,
		converted_amount=result.amount_out,
		exchange_rate=result.rate,
		formatted_amount=format_amount(result.amount_out),
		formatted_rate=format_rate(result.rate),
		pivot=snapshot.pivot,
		timestamp=snapshot.fetched_at,
		stale=snapshot.age(datetime.now(UTC)) > timedelta(seconds=settings.RATE_MAX_AGE_SECONDS),
	)
