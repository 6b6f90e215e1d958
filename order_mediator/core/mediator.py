#######################
## Mediator Patterns ##
#######################
from __future__ import annotations
from collections import deque
from typing import Any, Deque, Dict, Mapping, Optional, Tuple, TYPE_CHECKING
import logging
import threading

from order_mediator.core.component import Component
from order_mediator.core.exceptions import (
    AlreadyBoundError,
    ReentrantDispatchError,
    UnknownEventKindError,
    UnregisteredComponentError,
)
from order_mediator.core.reactions import DEFAULT_REACTIONS, Reaction
from order_mediator.core.state import State, IdleState, DispatchingState
from order_mediator.domain.message import Notification
from order_mediator.utils.enums import ComponentKind, CoordinatorStatus, Event, Observation
if TYPE_CHECKING:
    from order_mediator.components.delivery import DateSelector, SlotList
    from order_mediator.components.pickup import PickupFlag
    from order_mediator.components.recipient import RecipientFields, RecipientFlag
    from order_mediator.domain.slots import SlotProvider


class Coordinator:
    """
    The Coordinator owns every order-form component and is the only place where
    cross-component rules live. Components report their changes through
    ``notify``; the coordinator looks up the reaction for the event and lets it
    read and write the other components.

    Reactions run synchronously under a re-entrant lock, so once a component
    mutation returns, every dependent component is already consistent.
    """

    def __init__(
        self,
        date_selector: DateSelector,
        slot_list: SlotList,
        recipient_flag: RecipientFlag,
        recipient_fields: RecipientFields,
        pickup_flag: PickupFlag,
        slot_provider: SlotProvider,
        *,
        reactions: Optional[Mapping[Event, Reaction]] = None,
        logger: Optional[logging.Logger] = None,
        enforce_delivery_lock: bool = False,
        history_size: int = 100,
    ):
        self.name = "Coordinator"
        self.logger = logger or logging.getLogger(__name__)
        self.lock = threading.RLock()

        self.state: State = IdleState()
        self.status: CoordinatorStatus = CoordinatorStatus.IDLE

        # Component ownership is fixed for the coordinator's lifetime
        self._components: Dict[ComponentKind, Component] = {}
        for kind, component in (
            (ComponentKind.DATE_SELECTOR, date_selector),
            (ComponentKind.SLOT_LIST, slot_list),
            (ComponentKind.RECIPIENT_FLAG, recipient_flag),
            (ComponentKind.RECIPIENT_FIELDS, recipient_fields),
            (ComponentKind.PICKUP_FLAG, pickup_flag),
        ):
            if not isinstance(component, Component) or component.kind is not kind:
                raise TypeError(f"Expected a {kind.value} component, got {type(component).__name__}")
            self._components[kind] = component

        if not callable(slot_provider):
            raise TypeError("slot_provider must be callable")
        self.slot_provider = slot_provider

        self.reactions: Dict[Event, Reaction] = dict(DEFAULT_REACTIONS)
        for event, reaction in (reactions or {}).items():
            if not isinstance(event, Event):
                raise UnknownEventKindError(f"Cannot register a reaction for unknown event {event!r}")
            if not callable(reaction):
                raise TypeError(f"Reaction for {event.value} must be callable")
            self.reactions[event] = reaction

        if not isinstance(history_size, int) or history_size < 1:
            raise ValueError("history_size must be an integer >= 1")

        self.enforce_delivery_lock = enforce_delivery_lock
        self._delivery_enabled = True
        self._history: Deque[Notification] = deque(maxlen=history_size)
        self._observations: Deque[Observation] = deque(maxlen=history_size)
        self._counter = 0
        self.dispatch_count = 0

        # Bind all components or none of them
        blocked = [c.name for c in self._components.values() if not c.can_bind(self)]
        if blocked:
            raise AlreadyBoundError(f"Components already bound to another coordinator: {', '.join(blocked)}")
        for component in self._components.values():
            component.bind(self)

        self.logger.info(f"{self.name} created with {len(self._components)} components")

    def _get_next_counter(self):
        self._counter += 1
        return self._counter

    # ─── Components ───

    @property
    def date_selector(self) -> DateSelector:
        return self._components[ComponentKind.DATE_SELECTOR]

    @property
    def slot_list(self) -> SlotList:
        return self._components[ComponentKind.SLOT_LIST]

    @property
    def recipient_flag(self) -> RecipientFlag:
        return self._components[ComponentKind.RECIPIENT_FLAG]

    @property
    def recipient_fields(self) -> RecipientFields:
        return self._components[ComponentKind.RECIPIENT_FIELDS]

    @property
    def pickup_flag(self) -> PickupFlag:
        return self._components[ComponentKind.PICKUP_FLAG]

    @property
    def components(self) -> Dict[ComponentKind, Component]:
        return dict(self._components)

    # ─── Derived state ───

    @property
    def delivery_enabled(self) -> bool:
        return self._delivery_enabled

    @property
    def is_dispatching(self) -> bool:
        return self.status is CoordinatorStatus.DISPATCHING

    @property
    def last_observation(self) -> Optional[Observation]:
        return self._observations[-1] if self._observations else None

    @property
    def observations(self) -> Tuple[Observation, ...]:
        return tuple(self._observations)

    @property
    def history(self) -> Tuple[Notification, ...]:
        return tuple(self._history)

    def set_delivery_enabled(self, enabled: bool, observation: Observation):
        self._delivery_enabled = enabled
        self._observations.append(observation)

    def set_state(self, state: State, **kwargs):
        self.state = state
        self.state.execute(self, **kwargs)

    def capture(self) -> Dict[str, Any]:
        """Everything a failed reaction may have touched."""
        with self.lock:
            return {
                "components": {kind: c.state() for kind, c in self._components.items()},
                "delivery_enabled": self._delivery_enabled,
                "observations": list(self._observations),
            }

    def rollback(self, captured: Dict[str, Any]):
        with self.lock:
            for kind, state in captured["components"].items():
                self._components[kind]._restore(state)
            self._delivery_enabled = captured["delivery_enabled"]
            self._observations.clear()
            self._observations.extend(captured["observations"])
            self.logger.warning(f"{self.name} rolled back the form after a failed reaction")

    # ─── Dispatch ───

    def notify(self, sender: Component, event: Event):
        with self.lock:
            # The lock is re-entrant, so reaching here while dispatching means
            # a reaction on this same thread notified again
            if self.is_dispatching:
                raise ReentrantDispatchError(
                    f"{self.name} received {getattr(event, 'value', event)} while dispatching"
                )

            reaction = self.reactions.get(event) if isinstance(event, Event) else None
            if reaction is None:
                raise UnknownEventKindError(f"Event {event!r} has not been implemented.")

            if not any(sender is component for component in self._components.values()):
                raise UnregisteredComponentError(
                    f"{getattr(sender, 'name', type(sender).__name__)} is not registered with {self.name}"
                )

            notification = Notification(
                sequence=self._get_next_counter(),
                source=sender.kind,
                event=event,
            )
            self.set_state(DispatchingState(), notification=notification)
            try:
                reaction(self, notification)
                self._history.append(notification)
                self.dispatch_count += 1
            except Exception as e:
                self.logger.error(f"Reaction to {event.value} from {sender.name} failed: {e}")
                raise
            finally:
                self.set_state(IdleState(), notification=notification)

    def snapshot(self) -> Dict[str, Any]:
        """Plain-data view of every observable field."""
        with self.lock:
            selected = self.date_selector.selected_date
            return {
                "selected_date": selected.isoformat() if selected else None,
                "slots": self.slot_list.slots,
                "is_other_person": self.recipient_flag.is_other_person,
                "recipient_fields_visible": self.recipient_fields.visible,
                "is_pickup": self.pickup_flag.is_pickup,
                "delivery_enabled": self.delivery_enabled,
                "status": self.status.value,
                "last_observation": self.last_observation.value if self.last_observation else None,
                "dispatched": self.dispatch_count,
            }
