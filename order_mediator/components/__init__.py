"""
Order-form components coordinated by the Coordinator.
"""

from .delivery import DateSelector, SlotList
from .pickup import PickupFlag
from .recipient import RecipientFields, RecipientFlag

__all__ = [
    "DateSelector",
    "SlotList",
    "RecipientFlag",
    "RecipientFields",
    "PickupFlag",
]
