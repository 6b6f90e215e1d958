"""
Default reactions of the order-form coordinator.

A reaction receives the coordinator and the notification being dispatched and
re-reads whatever component state it needs; notifications carry no payload.
"""

from __future__ import annotations
from typing import Callable, Dict, TYPE_CHECKING

from order_mediator.utils.enums import Event, Observation
from order_mediator.utils.helpers import validate_slots
if TYPE_CHECKING:
    from order_mediator.core.mediator import Coordinator
    from order_mediator.domain.message import Notification

Reaction = Callable[["Coordinator", "Notification"], None]


def on_date_changed(coordinator: Coordinator, notification: Notification):
    selected = coordinator.date_selector.selected_date
    # Validate before writing so a bad provider leaves the slot list untouched
    slots = validate_slots(coordinator.slot_provider(selected))
    coordinator.slot_list.update_slots(slots)
    coordinator.logger.debug(f"Slots for {selected}: {slots}")


def on_recipient_changed(coordinator: Coordinator, notification: Notification):
    visible = coordinator.recipient_flag.is_other_person
    coordinator.recipient_fields.set_visible(visible)
    coordinator.logger.debug(f"Recipient fields {'shown' if visible else 'hidden'}")


def on_pickup_changed(coordinator: Coordinator, notification: Notification):
    if coordinator.pickup_flag.is_pickup:
        coordinator.set_delivery_enabled(False, Observation.DELIVERY_DISABLED)
        coordinator.logger.warning("Self-pickup selected, delivery components disabled")
    else:
        coordinator.set_delivery_enabled(True, Observation.DELIVERY_ENABLED)
        coordinator.logger.info("Delivery components enabled")


DEFAULT_REACTIONS: Dict[Event, Reaction] = {
    Event.DATE_CHANGED: on_date_changed,
    Event.RECIPIENT_CHANGED: on_recipient_changed,
    Event.PICKUP_CHANGED: on_pickup_changed,
}
