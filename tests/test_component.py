import gc
from datetime import date, datetime

import pytest

from order_mediator.components import DateSelector, PickupFlag, RecipientFields, RecipientFlag, SlotList
from order_mediator.core.exceptions import AlreadyBoundError, CoordinationError, NotBoundError
from order_mediator.core.mediator import Coordinator


@pytest.mark.parametrize(
    "component, mutate",
    [
        (DateSelector(), lambda c: c.select_date("2025-10-25")),
        (SlotList(), lambda c: c.update_slots(["10:00–12:00"])),
        (RecipientFlag(), lambda c: c.set_other_person(True)),
        (RecipientFields(), lambda c: c.set_visible(True)),
        (PickupFlag(), lambda c: c.set_pickup(True)),
    ],
)
def test_unbound_component_rejects_mutation(component, mutate):
    before = component.state()

    with pytest.raises(NotBoundError):
        mutate(component)
    assert component.state() == before
    assert component.is_bound is False


def test_not_bound_is_a_coordination_error():
    with pytest.raises(CoordinationError):
        PickupFlag().set_pickup(True)


def test_components_are_bound_at_construction(form):
    for component in form.coordinator.components.values():
        assert component.is_bound
        assert component.mediator is form.coordinator


def test_rebinding_to_same_coordinator_is_noop(form):
    form.pickup_flag.bind(form.coordinator)
    assert form.pickup_flag.mediator is form.coordinator


def test_component_cannot_join_second_coordinator(form, make_form):
    with pytest.raises(AlreadyBoundError):
        form.pickup_flag.bind(make_form().coordinator)


def test_second_coordinator_binds_nothing_when_one_component_is_taken(form, reference_slots):
    fresh = [DateSelector(), SlotList(), RecipientFlag(), RecipientFields()]

    with pytest.raises(AlreadyBoundError):
        Coordinator(*fresh, form.pickup_flag, lambda d: reference_slots)
    assert not any(component.is_bound for component in fresh)
    assert form.pickup_flag.mediator is form.coordinator


def test_component_does_not_keep_coordinator_alive(make_form):
    form = make_form()
    date_selector = form.date_selector
    del form
    gc.collect()

    with pytest.raises(NotBoundError):
        date_selector.select_date("2025-10-25")


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2025-10-25", date(2025, 10, 25)),
        ("25.10.2025", date(2025, 10, 25)),
        (date(2025, 10, 25), date(2025, 10, 25)),
        (datetime(2025, 10, 25, 14, 30), date(2025, 10, 25)),
    ],
)
def test_select_date_normalises_input(form, value, expected):
    form.date_selector.select_date(value)
    assert form.date_selector.selected_date == expected


def test_select_invalid_date_leaves_state_untouched(form):
    form.date_selector.select_date("2025-10-25")

    with pytest.raises(ValueError):
        form.date_selector.select_date("not a date")
    assert form.date_selector.selected_date == date(2025, 10, 25)
    assert form.coordinator.dispatch_count == 1


@pytest.mark.parametrize("value", [1, "yes", None])
def test_boolean_setters_reject_non_bool(form, value):
    with pytest.raises(TypeError):
        form.recipient_flag.set_other_person(value)
    with pytest.raises(TypeError):
        form.pickup_flag.set_pickup(value)
    with pytest.raises(TypeError):
        form.recipient_fields.set_visible(value)
    assert form.coordinator.history == ()


def test_update_slots_validates_and_copies(form):
    slots = ["10:00–12:00"]
    form.slot_list.update_slots(slots)
    slots.append("12:00–14:00")

    assert form.slot_list.slots == ["10:00–12:00"]
    with pytest.raises(TypeError):
        form.slot_list.update_slots("10:00–12:00")
    with pytest.raises(TypeError):
        form.slot_list.update_slots([10])


def test_slots_accessor_returns_copy(form):
    form.date_selector.select_date("2025-10-25")
    form.slot_list.slots.clear()
    assert form.slot_list.slots


def test_non_emitting_mutations_do_not_notify(form):
    form.slot_list.update_slots(["08:00–09:00"])
    form.recipient_fields.set_visible(True)

    assert form.coordinator.history == ()
    assert form.coordinator.dispatch_count == 0


def test_repr_shows_state(form):
    form.pickup_flag.set_pickup(True)
    assert repr(form.pickup_flag) == "PickupFlag({'is_pickup': True})"


def test_provider_receives_parsed_date(make_form):
    form = make_form(slot_provider=lambda d: [repr(d)])

    form.date_selector.select_date("25.10.2025")
    assert form.slot_list.slots == [repr(date(2025, 10, 25))]
