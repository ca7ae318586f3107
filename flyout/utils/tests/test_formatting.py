import pytest

from flyout.utils.formatting import format_boolean, format_number, format_value, is_empty_value, to_float


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, True),
        ("", True),
        ([], True),
        ({}, True),
        (0, False),
        (0.0, False),
        ("0", False),
        (False, False),
        ("text", False),
        ([0], False),
        (object(), False),
    ],
)
def test_is_empty_value(value, expected):
    assert is_empty_value(value) is expected


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, "—"),
        ("", "—"),
        (0, "0"),
        ("0", "0"),
        (True, "Yes"),
        (False, "No"),
        ([1, "two", 3], "1, two, 3"),
        ([], "—"),
        (12.5, "12.5"),
        ("plain", "plain"),
    ],
)
def test_format_value(value, expected):
    assert format_value(value) == expected


def test_format_value_custom_empty_text():
    assert format_value(None, "n/a") == "n/a"


def test_format_boolean():
    assert format_boolean(True) == "Yes"
    assert format_boolean(False) == "No"
    assert format_boolean(True, "Enabled", "Disabled") == "Enabled"
    assert format_boolean(False, "Enabled", "Disabled") == "Disabled"


@pytest.mark.parametrize(
    "value,expected",
    [
        (5.0, "5"),
        (2.5, "2.5"),
        (0.1 + 0.2, "0.3"),
        (1234567.0, "1234567"),
        (0, "0"),
    ],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_to_float():
    assert to_float("12.5") == 12.5
    assert to_float("abc") == 0.0
    assert to_float(None) == 0.0
    assert to_float(None, default=-1.0) == -1.0
