import math
from datetime import UTC, datetime, timedelta
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from currency_widget.api.dependencies import get_app_settings, get_rate_store, get_snapshot
from currency_widget.api.formatting import format_rate
from currency_widget.api.schemas import RatesResponse, ReferenceRateItem, ReferenceRatesResponse
from currency_widget.application.services import RateStore, reference_rates
from currency_widget.config.settings import Settings
from currency_widget.domain.models.currency import RateSnapshot

router = APIRouter(prefix='/api/rates', tags=['rates'])


def _rates_response(snapshot: RateSnapshot, settings: Settings) -> RatesResponse:
	age = snapshot.age(datetime.now(UTC))
	return RatesResponse(
		pivot=snapshot.pivot,
		rates={code: rate if math.isfinite(rate) else None for code, rate in snapshot.rates.items()},
		fetched_at=snapshot.fetched_at,
		age_seconds=age.total_seconds(),
		stale=age > timedelta(seconds=settings.RATE_MAX_AGE_SECONDS),
	)


@router.get(
	'',
	response_model=RatesResponse,
	status_code=status.HTTP_200_OK,
	summary='Current rate snapshot',
)
async def get_rates(
	snapshot: Annotated[RateSnapshot, Depends(get_snapshot)],
	settings: Annotated[Settings, Depends(get_app_settings)],
) -> RatesResponse:
	return _rates_response(snapshot, settings)


@router.post(
	'/refresh',
	response_model=RatesResponse,
	status_code=status.HTTP_200_OK,
	summary='Fetch fresh rates and replace the current snapshot',
)
async def refresh_rates(
	store: Annotated[RateStore, Depends(get_rate_store)],
	settings: Annotated[Settings, Depends(get_app_settings)],
	base: Annotated[str | None, Query(min_length=3, max_length=3)] = None,
) -> RatesResponse:
	pivot = (base or settings.DEFAULT_PIVOT).upper()
	snapshot = await store.refresh(pivot)
	return _rates_response(snapshot, settings)


@router.get(
	'/reference',
	response_model=ReferenceRatesResponse,
	status_code=status.HTTP_200_OK,
	summary='Reference rates for the configured base currency',
)
async def get_reference_rates(
	snapshot: Annotated[RateSnapshot, Depends(get_snapshot)],
	settings: Annotated[Settings, Depends(get_app_settings)],
) -> ReferenceRatesResponse:
	base = settings.REFERENCE_BASE
	table = reference_rates(snapshot, base, settings.REFERENCE_CURRENCIES)
	return ReferenceRatesResponse(
		base_currency=base,
		rates=[
			ReferenceRateItem(
				pair=f'{item.base_currency}/{item.target_currency}',
				rate=item.rate,
				formatted_rate=format_rate(item.rate),
			)
			for item in table
		],
		fetched_at=snapshot.fetched_at,
		stale=snapshot.age(datetime.now(UTC)) > timedelta(seconds=settings.RATE_MAX_AGE_SECONDS),
	)
