from order_mediator.core.component import Component
from order_mediator.utils.enums import ComponentKind, Event
from order_mediator.utils.helpers import require_bool


class PickupFlag(Component):
    """
    Self-pickup option. While it is set, the delivery date, slots and recipient
    components are considered disabled.
    """

    kind = ComponentKind.PICKUP_FLAG

    def __init__(self, logger=None):
        super().__init__(logger)
        self._is_pickup = False

    @property
    def is_pickup(self) -> bool:
        return self._is_pickup

    def set_pickup(self, value: bool):
        value = require_bool(value, "is_pickup")

        def apply():
            self._is_pickup = value
            self.logger.info(f"Self-pickup: {'yes' if value else 'no'}")

        self._emit(Event.PICKUP_CHANGED, apply)

    def state(self) -> dict:
        return {"is_pickup": self._is_pickup}

    def _restore(self, state: dict):
        self._is_pickup = state["is_pickup"]
