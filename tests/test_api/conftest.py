import pytest
from fastapi.testclient import TestClient

from currency_widget.api.dependencies import get_app_settings, get_rate_store, get_snapshot
from currency_widget.api.main import create_app
from currency_widget.application.services import RateStore


@pytest.fixture
def app(test_settings):
    app = create_app(test_settings)
    app.dependency_overrides[get_app_settings] = lambda: test_settings
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app, snapshot):
    # Serve the sample snapshot without any network access
    app.dependency_overrides[get_snapshot] = lambda: snapshot
    return TestClient(app)


@pytest.fixture
def store_client(app, provider_factory):
    """Client backed by a real RateStore over a scripted provider."""

    def make(outcomes):
        store = RateStore(provider_factory(outcomes))
        app.dependency_overrides[get_rate_store] = lambda: store
        return TestClient(app), store

    return make
