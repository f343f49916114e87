import logging
from unittest.mock import patch

from fastapi.testclient import TestClient

from currency_widget.api.main import create_app
from currency_widget.application.services import RateStore


def test_lifespan_loads_rates_and_logs_lifecycle(caplog, test_settings, provider_factory):
    caplog.set_level(logging.DEBUG, logger="currency_widget")
    provider = provider_factory([{"EUR": 0.9}])
    app = create_app(test_settings)

    with patch("currency_widget.api.main.configure_logging"), patch(
        "currency_widget.api.main.build_rate_store", return_value=RateStore(provider)
    ):
        with TestClient(app) as client:
            response = client.get("/api/rates")

    assert response.status_code == 200
    assert response.json()["pivot"] == test_settings.DEFAULT_PIVOT
    assert provider.closed
    lifecycle = [
        r.getMessage()
        for r in caplog.records
        if getattr(r, "extra_data", {}).get("event_type") == "service_lifecycle"
    ]
    assert lifecycle[0] == f"Starting {test_settings.APP_NAME}"
    assert lifecycle[-1] == "Shutdown complete"


def test_unhandled_error_is_logged_as_failed_request(caplog, test_settings):
    caplog.set_level(logging.DEBUG, logger="currency_widget")
    app = create_app(test_settings)

    @app.get("/boom")
    async def boom():
        raise RuntimeError("kaboom")

    client = TestClient(app, raise_server_exceptions=False)
    response = client.get("/boom")

    assert response.status_code == 500
    failed = [
        r for r in caplog.records
        if r.name == "currency_widget.api" and r.extra_data["user_context"]["endpoint"] == "/boom"
    ]
    assert len(failed) == 1
    assert failed[0].levelno == logging.ERROR
    assert failed[0].extra_data["error_context"] == {"error_message": "RuntimeError: kaboom"}
