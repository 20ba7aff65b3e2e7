"""Tests for the in-memory lookup implementation."""

from typing import Callable
from uuid import uuid4

from kitchen_flow.models.order import Order
from kitchen_flow.models.staff import StaffMember, UserRole
from kitchen_flow.models.station import Station, StationType
from kitchen_flow.state.repositories import (
    InMemoryKitchenState,
    OrderLookup,
    StationLookup,
    UserLookup,
)


def test_in_memory_state_satisfies_lookups() -> None:
    state = InMemoryKitchenState()

    assert isinstance(state, OrderLookup)
    assert isinstance(state, StationLookup)
    assert isinstance(state, UserLookup)


def test_station_orders_follow_assignment(
    make_order: Callable[..., Order],
    make_station: Callable[..., Station],
) -> None:
    """Orders belong to the station they are assigned to."""
    grill = make_station(StationType.GRILL)
    fryer = make_station(StationType.FRYER)
    on_grill = make_order(assigned_station_id=grill.id)
    unassigned = make_order()

    state = InMemoryKitchenState(orders=[on_grill, unassigned], stations=[grill, fryer])

    assert state.get_station_orders(grill.id) == [on_grill]
    assert state.get_station_orders(fryer.id) == []
    assert state.get_order(unassigned.id) == unassigned
    assert state.get_order(uuid4()) is None
    assert state.list_stations() == [grill, fryer]


def test_put_order_replaces_snapshot(make_order: Callable[..., Order]) -> None:
    order = make_order()
    state = InMemoryKitchenState(orders=[order])

    updated = order.model_copy(update={"priority": order.priority.escalate()})
    state.put_order(updated)

    assert state.get_order(order.id).priority.level == 3
    assert len(state.list_orders()) == 1


def test_roster_lists_known_users_once(
    make_station: Callable[..., Station],
    make_staff: Callable[..., StaffMember],
) -> None:
    station = make_station(StationType.PREP)
    cook = make_staff(UserRole.COOK)
    state = InMemoryKitchenState(stations=[station], users=[cook])

    state.add_to_roster(station.id, cook.id)
    state.add_to_roster(station.id, cook.id)
    state.add_to_roster(station.id, uuid4())

    assert state.get_station_roster(station.id) == [cook]
    assert state.get_station_roster(uuid4()) == []
    assert state.get_user(cook.id) == cook
    assert state.list_users() == [cook]


def test_put_station_and_user(
    make_station: Callable[..., Station],
    make_staff: Callable[..., StaffMember],
) -> None:
    state = InMemoryKitchenState()
    station = make_station(StationType.SALAD)
    staff = make_staff(UserRole.PREP_COOK)

    state.put_station(station)
    state.put_user(staff)
    state.put_user(staff.model_copy(update={"is_active": False}))

    assert state.get_station(station.id) == station
    assert state.get_user(staff.id).is_active is False
    assert len(state.list_users()) == 1
