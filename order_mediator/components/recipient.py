from order_mediator.core.component import Component
from order_mediator.utils.enums import ComponentKind, Event
from order_mediator.utils.helpers import require_bool


class RecipientFlag(Component):
    """Checkbox: the order is received by someone other than the customer."""

    kind = ComponentKind.RECIPIENT_FLAG
    delivery_related = True

    def __init__(self, logger=None):
        super().__init__(logger)
        self._is_other_person = False

    @property
    def is_other_person(self) -> bool:
        return self._is_other_person

    def set_other_person(self, value: bool):
        value = require_bool(value, "is_other_person")

        def apply():
            self._is_other_person = value
            self.logger.info(f"Recipient is another person: {'yes' if value else 'no'}")

        self._emit(Event.RECIPIENT_CHANGED, apply)

    def state(self) -> dict:
        return {"is_other_person": self._is_other_person}

    def _restore(self, state: dict):
        self._is_other_person = state["is_other_person"]


class RecipientFields(Component):
    """Name and phone inputs of a third-party recipient."""

    kind = ComponentKind.RECIPIENT_FIELDS

    def __init__(self, logger=None):
        super().__init__(logger)
        self._visible = False

    @property
    def visible(self) -> bool:
        return self._visible

    def set_visible(self, value: bool):
        value = require_bool(value, "visible")

        def apply():
            self._visible = value
            self.logger.info(f"Recipient name and phone fields {'shown' if value else 'hidden'}")

        self._update(apply)

    def state(self) -> dict:
        return {"visible": self._visible}

    def _restore(self, state: dict):
        self._visible = state["visible"]
