##########################
## Component Base Class ##
##########################

from __future__ import annotations
import logging
import weakref
from abc import ABC, abstractmethod
from typing import Callable, Optional, TYPE_CHECKING

from order_mediator.core.exceptions import (
    AlreadyBoundError,
    DeliveryLockedError,
    NotBoundError,
    ReentrantDispatchError,
)
from order_mediator.utils.enums import ComponentKind, Event
if TYPE_CHECKING:
    from order_mediator.core.mediator import Coordinator


class Component(ABC):
    """
    A unit of order-form state. Components never talk to each other; every
    change that matters to someone else is reported to the bound coordinator.
    """

    kind: ComponentKind
    # Delivery components can be locked while self-pickup is active
    delivery_related: bool = False

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        self.name = self.kind.value
        self._mediator_ref: Optional[weakref.ReferenceType[Coordinator]] = None

    def bind(self, coordinator: Coordinator):
        if self._mediator_ref is not None:
            if self._mediator_ref() is coordinator:
                return
            raise AlreadyBoundError(f"{self.name} is already bound to another coordinator")
        self._mediator_ref = weakref.ref(coordinator)
        self.logger.debug(f"{self.name} bound to coordinator")

    def can_bind(self, coordinator: Coordinator) -> bool:
        return self._mediator_ref is None or self._mediator_ref() is coordinator

    @property
    def is_bound(self) -> bool:
        return self._mediator_ref is not None and self._mediator_ref() is not None

    @property
    def mediator(self) -> Coordinator:
        coordinator = self._mediator_ref() if self._mediator_ref is not None else None
        if coordinator is None:
            raise NotBoundError(f"{self.name} is not bound to a coordinator")
        return coordinator

    def _emit(self, event: Event, apply: Callable[[], None]):
        """
        Apply a caller-facing state change and report it.

        The whole mutation and the reaction it triggers run under the
        coordinator lock. Guards run before ``apply`` so a rejected call
        leaves the component untouched. If the reaction fails, the form is
        rolled back to what it was before ``apply``.
        """
        coordinator = self.mediator
        with coordinator.lock:
            if coordinator.is_dispatching:
                raise ReentrantDispatchError(
                    f"{self.name} cannot emit {event.value} while {coordinator.name} is dispatching"
                )
            if self.delivery_related and coordinator.enforce_delivery_lock and not coordinator.delivery_enabled:
                raise DeliveryLockedError(f"{self.name} is disabled while self-pickup is selected")
            saved = coordinator.capture()
            apply()
            try:
                coordinator.notify(self, event)
            except Exception:
                coordinator.rollback(saved)
                raise

    def _update(self, apply: Callable[[], None]):
        """Apply a state change that nobody else depends on."""
        coordinator = self.mediator
        with coordinator.lock:
            apply()

    def __repr__(self):
        return f"{self.__class__.__name__}({self.state()!r})"

    @abstractmethod
    def state(self) -> dict:
        pass

    @abstractmethod
    def _restore(self, state: dict):
        """Put back a ``state()`` taken earlier, without notifying."""
