from datetime import date, datetime
from typing import Any, Dict, List, Sequence

from dateutil import parser as date_parser
from tabulate import tabulate


def parse_date(value: date | datetime | str) -> date:
    """
    Normalise a delivery date to ``datetime.date``.

    ISO strings (``2025-10-25``) are tried first, then the day-first forms used
    on order forms (``25.10.2025``, ``25/10/2025``).
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise TypeError(f"Date must be a date, datetime or string, got {type(value).__name__}")

    text = value.strip()
    if not text:
        raise ValueError("Date string must not be empty")

    try:
        return date_parser.isoparse(text).date()
    except ValueError:
        pass

    try:
        return date_parser.parse(text, dayfirst=True).date()
    except (ValueError, OverflowError) as err:
        raise ValueError(f"Unable to parse date '{value}': {err}") from err


def validate_slots(slots: Any) -> List[str]:
    """Return a list copy of ``slots`` or raise TypeError when it is not a sequence of strings."""
    if isinstance(slots, (str, bytes)) or not isinstance(slots, Sequence):
        raise TypeError(f"Slots must be a sequence of strings, got {type(slots).__name__}")
    for slot in slots:
        if not isinstance(slot, str):
            raise TypeError(f"Slot {slot!r} must be a string, got {type(slot).__name__}")
    return list(slots)


def require_bool(value: Any, field: str) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"{field} must be a bool, got {type(value).__name__}")
    return value


def format_snapshot(snapshot: Dict[str, Any], tablefmt: str = "simple") -> str:
    """Render a coordinator snapshot as a two-column table."""
    rows = []
    for key, value in snapshot.items():
        if isinstance(value, (list, tuple)):
            value = ", ".join(str(v) for v in value) if value else "-"
        elif value is None:
            value = "-"
        rows.append([key, value])
    return tabulate(rows, headers=["Field", "Value"], tablefmt=tablefmt)
