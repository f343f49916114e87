"""
Shared fixtures: a scripted rate provider and a sample snapshot.
"""

import pytest

from currency_widget.config.settings import Settings
from currency_widget.domain.models.currency import RateSnapshot
from currency_widget.infrastructure.providers.base import ExchangeRateProvider

SAMPLE_RATES = {
    "USD": 1.0,
    "EUR": 0.9,
    "JPY": 150.0,
    "GBP": 0.8,
    "CNY": 7.2,
}


class FakeProvider(ExchangeRateProvider):
    """
    Provider that replays scripted outcomes, one per fetch.

    Each outcome is a rates dict, an exception to raise, or a
    (asyncio.Event, outcome) pair that waits for the event first.
    """

    def __init__(self, outcomes=None):
        self.outcomes = list(outcomes or [])
        self.calls = []
        self.closed = False

    @property
    def name(self) -> str:
        return "fake"

    async def fetch_latest(self, base: str) -> dict[str, float]:
        self.calls.append(base)
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, tuple):
            gate, outcome = outcome
            await gate.wait()
        if isinstance(outcome, BaseException):
            raise outcome
        return dict(outcome)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def snapshot():
    return RateSnapshot(pivot="USD", rates=SAMPLE_RATES)


@pytest.fixture
def fake_provider():
    return FakeProvider()


@pytest.fixture
def test_settings():
    return Settings(
        _env_file=None,
        RATE_MAX_AGE_SECONDS=3600,
        REFERENCE_BASE="CNY",
        REFERENCE_CURRENCIES=["USD", "EUR", "JPY", "GBP", "CAD", "AUD"],
        STARTUP_REFRESH_ATTEMPTS=3,
        STARTUP_RETRY_WAIT_SECONDS=0,
    )


@pytest.fixture
def provider_factory():
    return FakeProvider
