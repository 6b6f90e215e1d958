from .message import Notification
from .slots import DEFAULT_SLOTS, ScheduleSlotProvider, SlotProvider, static_slot_provider

__all__ = [
    "Notification",
    "DEFAULT_SLOTS",
    "ScheduleSlotProvider",
    "SlotProvider",
    "static_slot_provider",
]
