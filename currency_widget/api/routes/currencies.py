from typing import Annotated

from fastapi import APIRouter, Depends, status

from currency_widget.api.dependencies import get_snapshot
from currency_widget.api.schemas import CurrencyInfo, SupportedCurrenciesResponse
from currency_widget.domain.models.currency import RateSnapshot, currency_name

router = APIRouter(prefix='/api', tags=['currency'])


@router.get(
	'/currencies',
	response_model=SupportedCurrenciesResponse,
	status_code=status.HTTP_200_OK,
	summary='List currencies usable for conversion',
)
async def get_supported_currencies(
	snapshot: Annotated[RateSnapshot, Depends(get_snapshot)],
) -> SupportedCurrenciesResponse:
	return SupportedCurrenciesResponse(
		currencies=[
			CurrencyInfo(code=code, name=currency_name(code)) for code in snapshot.usable_currencies()
		]
	)
