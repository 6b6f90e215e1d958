from __future__ import annotations
from datetime import date
from typing import Callable, Dict, List, Optional, Sequence, TYPE_CHECKING

from order_mediator.utils.enums import DEFAULT_SLOTS, WEEKDAYS
from order_mediator.utils.helpers import parse_date
if TYPE_CHECKING:
    from order_mediator.utils.config import SlotsConfig

# Providers always receive the parsed datetime.date (or None before any
# selection), never the raw value given to DateSelector.select_date
SlotProvider = Callable[[Optional[date]], Sequence[str]]


def static_slot_provider(slots: Sequence[str]) -> SlotProvider:
    """Provider that offers the same slots for every selected date."""
    fixed = list(slots)

    def provider(selected: Optional[date]) -> List[str]:
        if selected is None:
            return []
        return list(fixed)

    return provider


class ScheduleSlotProvider:
    """
    Resolves the available slots for a date from a small schedule.

    Lookup order is: explicit date override, weekday override, default.
    An empty list for a date or weekday means "no delivery on that day".
    """

    def __init__(
        self,
        default: Sequence[str],
        weekdays: Optional[Dict[str, Sequence[str]]] = None,
        dates: Optional[Dict[date | str, Sequence[str]]] = None,
    ):
        self.default: List[str] = list(default)
        self.weekdays: Dict[str, List[str]] = {}
        self.dates: Dict[date, List[str]] = {}

        for weekday, slots in (weekdays or {}).items():
            key = weekday.strip().lower()
            if key not in WEEKDAYS:
                raise ValueError(f"Unknown weekday '{weekday}'. Allowed: {', '.join(WEEKDAYS)}")
            self.weekdays[key] = list(slots)

        for day, slots in (dates or {}).items():
            self.dates[parse_date(day)] = list(slots)

    @classmethod
    def from_config(cls, config: SlotsConfig) -> ScheduleSlotProvider:
        return cls(default=config.Default, weekdays=config.Weekdays, dates=config.Dates)

    def __call__(self, selected: Optional[date]) -> List[str]:
        if selected is None:
            return []
        if selected in self.dates:
            return list(self.dates[selected])
        weekday = WEEKDAYS[selected.weekday()]
        if weekday in self.weekdays:
            return list(self.weekdays[weekday])
        return list(self.default)

    def __repr__(self):
        return (
            f"ScheduleSlotProvider(default={self.default}, "
            f"weekdays={sorted(self.weekdays)}, dates={sorted(self.dates)})"
        )
