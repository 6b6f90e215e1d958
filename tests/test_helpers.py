from datetime import date, datetime

import pytest

from order_mediator.utils.helpers import format_snapshot, parse_date, require_bool, validate_slots


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2025-10-25", date(2025, 10, 25)),
        ("2025-10-05", date(2025, 10, 5)),
        ("25.10.2025", date(2025, 10, 25)),
        ("05/10/2025", date(2025, 10, 5)),
        ("  2025-10-25  ", date(2025, 10, 25)),
        (datetime(2025, 10, 25, 8, 0), date(2025, 10, 25)),
        (date(2025, 10, 25), date(2025, 10, 25)),
    ],
)
def test_parse_date(value, expected):
    assert parse_date(value) == expected


@pytest.mark.parametrize("value", ["", "   ", "not a date", "32.13.2025"])
def test_parse_date_rejects_garbage(value):
    with pytest.raises(ValueError):
        parse_date(value)


def test_parse_date_rejects_other_types():
    with pytest.raises(TypeError):
        parse_date(20251025)


def test_validate_slots():
    assert validate_slots(("10:00–12:00", "12:00–14:00")) == ["10:00–12:00", "12:00–14:00"]
    assert validate_slots([]) == []

    for bad in ("10:00–12:00", b"10:00", None, {"10:00–12:00"}, [1, 2]):
        with pytest.raises(TypeError):
            validate_slots(bad)


def test_require_bool():
    assert require_bool(False, "flag") is False
    with pytest.raises(TypeError, match="flag"):
        require_bool(0, "flag")


def test_format_snapshot():
    table = format_snapshot({
        "selected_date": None,
        "slots": ["10:00–12:00", "12:00–14:00"],
        "delivery_enabled": True,
        "empty": [],
    })

    lines = table.splitlines()
    assert "Field" in lines[0] and "Value" in lines[0]
    assert "10:00–12:00, 12:00–14:00" in table
    assert any(line.startswith("selected_date") and line.rstrip().endswith("-") for line in lines)
    assert any(line.startswith("empty") and line.rstrip().endswith("-") for line in lines)
