from datetime import date, datetime
from typing import List, Optional, Sequence

from order_mediator.core.component import Component
from order_mediator.utils.enums import ComponentKind, Event
from order_mediator.utils.helpers import parse_date, validate_slots


class DateSelector(Component):
    """
    Delivery date picker. Selecting a date refreshes the available slots.

    Strings are parsed before anything else, so "25.10.2025" and "2025-10-25"
    select the same date and the slot provider sees that date, not the string.
    """

    kind = ComponentKind.DATE_SELECTOR
    delivery_related = True

    def __init__(self, logger=None):
        super().__init__(logger)
        self._selected_date: Optional[date] = None

    @property
    def selected_date(self) -> Optional[date]:
        return self._selected_date

    def select_date(self, value: date | datetime | str):
        # Parse first so an invalid value never reaches the component state
        selected = parse_date(value)

        def apply():
            self._selected_date = selected
            self.logger.info(f"Delivery date selected: {selected.isoformat()}")

        self._emit(Event.DATE_CHANGED, apply)

    def state(self) -> dict:
        return {"selected_date": self._selected_date}

    def _restore(self, state: dict):
        self._selected_date = state["selected_date"]


class SlotList(Component):
    """Time slots offered for the selected delivery date."""

    kind = ComponentKind.SLOT_LIST

    def __init__(self, logger=None):
        super().__init__(logger)
        self._slots: List[str] = []

    @property
    def slots(self) -> List[str]:
        return list(self._slots)

    def update_slots(self, slots: Sequence[str]):
        new_slots = validate_slots(slots)

        def apply():
            self._slots = new_slots
            self.logger.info(f"Available time slots: {', '.join(new_slots) or 'none'}")

        self._update(apply)

    def state(self) -> dict:
        return {"slots": list(self._slots)}

    def _restore(self, state: dict):
        self._slots = list(state["slots"])
