import pytest

from currency_widget.api.formatting import format_amount, format_rate


@pytest.mark.parametrize(
    "value,expected",
    [
        (16666.666666666668, "16,666.6667"),
        (100.0, "100.00"),
        (85.5, "85.50"),
        (0.123456, "0.1235"),
        (1234567.891, "1,234,567.891"),
    ],
)
def test_format_amount(value, expected):
    assert format_amount(value) == expected


def test_format_amount_custom_digits():
    assert format_amount(2.5, min_digits=0, max_digits=2) == "2.5"
    assert format_amount(2.0, min_digits=0, max_digits=2) == "2"
    assert format_amount(2.0, min_digits=0, max_digits=0) == "2"


def test_format_rate_has_four_digits():
    assert format_rate(166.66666) == "166.6667"
    assert format_rate(1) == "1.0000"


@pytest.mark.parametrize("value,expected", [(float("inf"), "inf"), (float("-inf"), "-inf"), (float("nan"), "nan")])
def test_format_amount_non_finite(value, expected):
    assert format_amount(value) == expected
