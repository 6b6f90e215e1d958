import logging
from types import SimpleNamespace

import pytest

from order_mediator.components import DateSelector, PickupFlag, RecipientFields, RecipientFlag, SlotList
from order_mediator.core.mediator import Coordinator
from order_mediator.domain.slots import static_slot_provider

REFERENCE_SLOTS = ["10:00–12:00", "12:00–14:00", "16:00–18:00"]


@pytest.fixture
def logger():
    return logging.getLogger("order-mediator-tests")


def build_form(slot_provider=None, logger=None, **kwargs):
    """Create the five components and a coordinator bound to them."""
    components = SimpleNamespace(
        date_selector=DateSelector(logger),
        slot_list=SlotList(logger),
        recipient_flag=RecipientFlag(logger),
        recipient_fields=RecipientFields(logger),
        pickup_flag=PickupFlag(logger),
    )
    # The namespace keeps the coordinator alive; components only hold a weak reference
    components.coordinator = Coordinator(
        components.date_selector,
        components.slot_list,
        components.recipient_flag,
        components.recipient_fields,
        components.pickup_flag,
        slot_provider or static_slot_provider(REFERENCE_SLOTS),
        logger=logger,
        **kwargs,
    )
    return components


@pytest.fixture
def form(logger):
    return build_form(logger=logger)


@pytest.fixture
def dated_form(logger):
    """Form whose provider echoes the selected date, so each date yields different slots."""
    return build_form(
        slot_provider=lambda d: [] if d is None else [f"{d.isoformat()} 09:00–11:00", f"{d.isoformat()} 15:00–17:00"],
        logger=logger,
    )


@pytest.fixture
def make_form(logger):
    def factory(slot_provider=None, **kwargs):
        return build_form(slot_provider=slot_provider, logger=logger, **kwargs)
    return factory


@pytest.fixture
def reference_slots():
    return list(REFERENCE_SLOTS)
