"""
Order Form Mediator - coordination core for interacting order-form components.

Components (delivery date, time slots, recipient options, self-pickup) hold
their own state and report changes to a single Coordinator, which keeps the
dependent components consistent.
"""

__version__ = "0.1.0"

from order_mediator.core import (
    Component,
    Coordinator,
    CoordinationError,
    NotBoundError,
    AlreadyBoundError,
    UnknownEventKindError,
    UnregisteredComponentError,
    ReentrantDispatchError,
    DeliveryLockedError,
)
from order_mediator.components import DateSelector, SlotList, RecipientFlag, RecipientFields, PickupFlag
from order_mediator.domain import Notification, ScheduleSlotProvider, static_slot_provider
from order_mediator.utils.enums import ComponentKind, CoordinatorStatus, Event, Observation
from order_mediator.client import OrderFormClient, OrderFormClientError

__all__ = [
    # Core
    'Component', 'Coordinator',
    # Errors
    'CoordinationError', 'NotBoundError', 'AlreadyBoundError', 'UnknownEventKindError',
    'UnregisteredComponentError', 'ReentrantDispatchError', 'DeliveryLockedError',
    # Components
    'DateSelector', 'SlotList', 'RecipientFlag', 'RecipientFields', 'PickupFlag',
    # Domain
    'Notification', 'ScheduleSlotProvider', 'static_slot_provider',
    # Enums
    'ComponentKind', 'CoordinatorStatus', 'Event', 'Observation',
    # Client
    'OrderFormClient', 'OrderFormClientError',
    # Version
    '__version__',
]
