from enum import Enum


class Event(Enum):
    DATE_CHANGED = "DateChanged"
    RECIPIENT_CHANGED = "RecipientChanged"
    PICKUP_CHANGED = "PickupChanged"


class ComponentKind(Enum):
    DATE_SELECTOR = "DateSelector"
    SLOT_LIST = "SlotList"
    RECIPIENT_FLAG = "RecipientFlag"
    RECIPIENT_FIELDS = "RecipientFields"
    PICKUP_FLAG = "PickupFlag"


class Observation(Enum):
    DELIVERY_DISABLED = "DeliveryDisabled"
    DELIVERY_ENABLED = "DeliveryEnabled"


class CoordinatorStatus(Enum):
    IDLE = "idle"
    DISPATCHING = "dispatching"


WEEKDAYS = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

# Illustrative slots offered on every day unless a schedule says otherwise
DEFAULT_SLOTS = ("10:00–12:00", "12:00–14:00", "16:00–18:00")
