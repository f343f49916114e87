import pytest

from currency_widget.api.dependencies import bootstrap
from currency_widget.application.services import RateStore
from currency_widget.domain.exceptions.currency import HttpStatusError, NetworkError


@pytest.mark.asyncio
async def test_bootstrap_loads_default_pivot(provider_factory, test_settings):
    store = RateStore(provider_factory([{"EUR": 0.9}]))

    snapshot = await bootstrap(store, test_settings)

    assert snapshot is store.current()
    assert snapshot.pivot == test_settings.DEFAULT_PIVOT


@pytest.mark.asyncio
async def test_bootstrap_retries_network_errors(provider_factory, test_settings):
    provider = provider_factory([NetworkError("reset"), {"EUR": 0.9}])
    store = RateStore(provider)

    snapshot = await bootstrap(store, test_settings)

    assert snapshot is not None
    assert len(provider.calls) == 2


@pytest.mark.asyncio
async def test_bootstrap_does_not_retry_http_errors(provider_factory, test_settings):
    provider = provider_factory([HttpStatusError(503)])
    store = RateStore(provider)

    snapshot = await bootstrap(store, test_settings)

    assert snapshot is None
    assert store.current() is None
    assert len(provider.calls) == 1


@pytest.mark.asyncio
async def test_bootstrap_gives_up_after_configured_attempts(provider_factory, test_settings):
    test_settings.STARTUP_REFRESH_ATTEMPTS = 2
    provider = provider_factory([NetworkError("down"), NetworkError("down")])
    store = RateStore(provider)

    snapshot = await bootstrap(store, test_settings)

    assert snapshot is None
    assert len(provider.calls) == 2
