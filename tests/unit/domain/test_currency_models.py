from dataclasses import FrozenInstanceError
from datetime import UTC, datetime, timedelta

import pytest

from currency_widget.domain.exceptions.currency import (
    FetchError,
    HttpStatusError,
    UnknownCurrencyError,
    UnusableRateError,
)
from currency_widget.domain.models.currency import RateSnapshot, currency_name


def test_snapshot_copies_input_mapping():
    rates = {"USD": 1.0, "EUR": 0.9}
    snapshot = RateSnapshot(pivot="USD", rates=rates)

    rates["EUR"] = 5.0

    assert snapshot.rates["EUR"] == 0.9


def test_snapshot_is_frozen(snapshot):
    with pytest.raises(FrozenInstanceError):
        snapshot.pivot = "EUR"
    with pytest.raises(TypeError):
        snapshot.rates["USD"] = 2.0


def test_snapshot_age():
    fetched_at = datetime(2025, 9, 30, 10, 0, tzinfo=UTC)
    snapshot = RateSnapshot(pivot="USD", rates={"USD": 1.0}, fetched_at=fetched_at)

    assert snapshot.age(fetched_at + timedelta(minutes=5)) == timedelta(minutes=5)


def test_usable_currencies_excludes_bad_rates():
    snapshot = RateSnapshot(
        pivot="USD", rates={"USD": 1.0, "EUR": 0.9, "ZER": 0.0, "NEG": -3.0, "NAN": float("nan")}
    )

    assert snapshot.usable_currencies() == ["EUR", "USD"]


def test_currency_name_falls_back_to_code():
    assert currency_name("EUR") == "Euro"
    assert currency_name("XYZ") == "XYZ"


def test_exception_hierarchy():
    assert issubclass(HttpStatusError, FetchError)
    assert issubclass(UnusableRateError, UnknownCurrencyError)
    assert HttpStatusError(503).status_code == 503
    assert "503" in str(HttpStatusError(503))
