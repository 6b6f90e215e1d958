####################
## State Patterns ##
####################

from abc import ABC, abstractmethod

from order_mediator.utils.enums import CoordinatorStatus


class State(ABC):
    status: CoordinatorStatus

    @abstractmethod
    def execute(self, coordinator, **kwargs):
        pass


class IdleState(State):
    """
    No reaction is running; the coordinator accepts notifications.
    """

    status = CoordinatorStatus.IDLE

    def execute(self, coordinator, **kwargs):
        coordinator.status = self.status
        notification = kwargs.get("notification")
        if notification is not None:
            coordinator.logger.debug(f"{coordinator.name} is idle after {notification.event.value} (seq {notification.sequence})")


class DispatchingState(State):
    """
    A reaction is running. Any further notification is re-entrant and rejected.
    """

    status = CoordinatorStatus.DISPATCHING

    def execute(self, coordinator, **kwargs):
        coordinator.status = self.status
        notification = kwargs.get("notification")
        if notification is not None:
            coordinator.logger.debug(
                f"{coordinator.name} is dispatching {notification.event.value} "
                f"from {notification.source.value} (seq {notification.sequence})"
            )
