from datetime import UTC, datetime, timedelta
from typing import Annotated

from fastapi import APIRouter, Depends

from currency_widget.api.dependencies import get_app_settings, get_rate_store
from currency_widget.api.schemas import HealthResponse
from currency_widget.application.services import RateStore
from currency_widget.config.settings import Settings
from currency_widget.monitoring.logger import EventType, LogEvent, LogLevel, get_production_logger

router = APIRouter(tags=['health'])

production_logger = get_production_logger()


@router.get('/health', response_model=HealthResponse, summary='Rate snapshot health')
async def health_check(
	store: Annotated[RateStore, Depends(get_rate_store)],
	settings: Annotated[Settings, Depends(get_app_settings)],
) -> HealthResponse:
	now = datetime.now(UTC)
	snapshot = store.current()
	stale = store.is_stale(timedelta(seconds=settings.RATE_MAX_AGE_SECONDS), now=now)
	status = 'degraded' if stale else 'healthy'

	production_logger.log_event(
		LogEvent(
			event_type=EventType.HEALTH_CHECK,
			level=LogLevel.WARNING if stale else LogLevel.DEBUG,
			message=f'Health check: {status}',
			timestamp=now,
		)
	)

	return HealthResponse(
		status=status,
		timestamp=now,
		pivot=snapshot.pivot if snapshot else None,
		fetched_at=snapshot.fetched_at if snapshot else None,
		stale=stale,
	)
