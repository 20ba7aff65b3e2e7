"""Tests for the id-based kitchen coordinator."""

from decimal import Decimal
from typing import Callable
from uuid import uuid4

import pytest

from kitchen_flow.models.decision import RejectKind
from kitchen_flow.models.order import Order, OrderStatus
from kitchen_flow.models.staff import StaffMember, UserRole
from kitchen_flow.models.station import Station, StationType
from kitchen_flow.services.coordinator import KitchenCoordinator
from kitchen_flow.services.workflow_validator import WorkflowValidator
from kitchen_flow.state.repositories import InMemoryKitchenState
from kitchen_flow.utils.tracing import EvaluationTracer


@pytest.fixture
def grill(make_station: Callable[..., Station]) -> Station:
    return make_station(StationType.GRILL, capacity=1)


@pytest.fixture
def sous_chef(make_staff: Callable[..., StaffMember]) -> StaffMember:
    return make_staff(UserRole.SOUS_CHEF)


@pytest.fixture
def line_cook(make_staff: Callable[..., StaffMember]) -> StaffMember:
    return make_staff(UserRole.LINE_COOK)


@pytest.fixture
def kitchen(
    grill: Station,
    beverage_station: Station,
    sous_chef: StaffMember,
    line_cook: StaffMember,
    make_staff: Callable[..., StaffMember],
) -> InMemoryKitchenState:
    state = InMemoryKitchenState(
        stations=[beverage_station, grill],
        users=[sous_chef, line_cook, make_staff(UserRole.DISHWASHER)],
    )
    for user in state.list_users():
        state.add_to_roster(grill.id, user.id)
    return state


@pytest.fixture
def coordinator(kitchen: InMemoryKitchenState, validator: WorkflowValidator) -> KitchenCoordinator:
    return KitchenCoordinator(kitchen, kitchen, kitchen, validator=validator)


def test_status_change_for_stored_ids(
    coordinator: KitchenCoordinator,
    kitchen: InMemoryKitchenState,
    sample_order: Order,
    sous_chef: StaffMember,
    line_cook: StaffMember,
) -> None:
    kitchen.put_order(sample_order)

    assert coordinator.request_status_change(sample_order.id, OrderStatus.CONFIRMED, sous_chef.id)
    refused = coordinator.request_status_change(
        sample_order.id, OrderStatus.CONFIRMED, line_cook.id
    )
    assert refused.kind == RejectKind.UNAUTHORIZED


def test_unknown_ids_are_rejected(
    coordinator: KitchenCoordinator,
    kitchen: InMemoryKitchenState,
    sample_order: Order,
    sous_chef: StaffMember,
    grill: Station,
) -> None:
    kitchen.put_order(sample_order)
    missing = uuid4()

    unknown_order = coordinator.request_status_change(missing, OrderStatus.CONFIRMED, sous_chef.id)
    unknown_user = coordinator.request_status_change(
        sample_order.id, OrderStatus.CONFIRMED, missing
    )
    unknown_station = coordinator.request_assignment(sample_order.id, missing)
    unknown_staff = coordinator.request_staff_assignment(missing, grill.id, sample_order.id)

    assert unknown_order.kind == RejectKind.GUARD_VIOLATION
    assert "not found" in unknown_order.reason
    assert unknown_user.kind == RejectKind.UNAUTHORIZED
    assert unknown_station.kind == RejectKind.GUARD_VIOLATION
    assert unknown_staff.kind == RejectKind.STAFF_UNQUALIFIED


def test_assignment_ignores_the_order_itself(
    coordinator: KitchenCoordinator,
    kitchen: InMemoryKitchenState,
    make_order: Callable[..., Order],
    grill: Station,
) -> None:
    """A single-slot grill still accepts the order already placed on it."""
    order = make_order(assigned_station_id=grill.id)
    kitchen.put_order(order)

    assert coordinator.request_assignment(order.id, grill.id)

    kitchen.put_order(make_order(assigned_station_id=grill.id))
    decision = coordinator.request_assignment(order.id, grill.id)
    assert decision.kind == RejectKind.CAPACITY_EXCEEDED


def test_suggest_station(
    coordinator: KitchenCoordinator,
    kitchen: InMemoryKitchenState,
    sample_order: Order,
    grill: Station,
) -> None:
    kitchen.put_order(sample_order)

    assert coordinator.suggest_station(sample_order.id) == grill
    assert coordinator.suggest_station(uuid4()) is None


def test_staff_assignment_and_qualified_staff(
    coordinator: KitchenCoordinator,
    kitchen: InMemoryKitchenState,
    make_order: Callable[..., Order],
    grill: Station,
    sous_chef: StaffMember,
    line_cook: StaffMember,
) -> None:
    order = make_order(total_amount=Decimal("120.00"))
    kitchen.put_order(order)

    assert coordinator.request_staff_assignment(sous_chef.id, grill.id, order.id)
    assert not coordinator.request_staff_assignment(line_cook.id, grill.id, order.id)
    assert coordinator.qualified_staff(grill.id, order.id) == [sous_chef]
    assert coordinator.qualified_staff(uuid4(), order.id) == []


def test_capacity_check_uses_stored_state(
    coordinator: KitchenCoordinator,
    kitchen: InMemoryKitchenState,
    make_order: Callable[..., Order],
) -> None:
    kitchen.put_order(make_order(status=OrderStatus.CONFIRMED))

    assert coordinator.request_capacity_check()
    assert coordinator.request_capacity_check(max_concurrent=1).kind == (
        RejectKind.CAPACITY_EXCEEDED
    )


def test_requests_are_traced(
    kitchen: InMemoryKitchenState,
    validator: WorkflowValidator,
    sample_order: Order,
    sous_chef: StaffMember,
) -> None:
    tracer = EvaluationTracer()
    coordinator = KitchenCoordinator(kitchen, kitchen, kitchen, validator=validator, tracer=tracer)
    kitchen.put_order(sample_order)

    coordinator.request_status_change(sample_order.id, OrderStatus.CONFIRMED, sous_chef.id)
    coordinator.request_status_change(sample_order.id, OrderStatus.READY, sous_chef.id)
    coordinator.suggest_station(sample_order.id)

    summary = tracer.get_trace_summary()

    assert summary["total_events"] == 3
    assert summary["operation_stats"]["status_change"]["event_count"] == 2
    assert [event["metadata"].get("accepted") for event in summary["events"][:2]] == [
        True,
        False,
    ]
    assert summary["events"][2]["metadata"]["station_id"] is not None


def test_confirmation_respects_kitchen_capacity(
    coordinator: KitchenCoordinator,
    kitchen: InMemoryKitchenState,
    make_order: Callable[..., Order],
    sous_chef: StaffMember,
) -> None:
    """A kitchen at its cap refuses to confirm another order."""
    for _ in range(3):
        kitchen.put_order(make_order(status=OrderStatus.CONFIRMED))
    pending = make_order()
    kitchen.put_order(pending)

    assert coordinator.request_capacity_check(max_concurrent=3).kind == (
        RejectKind.CAPACITY_EXCEEDED
    )
    decision = coordinator.request_status_change(
        pending.id, OrderStatus.CONFIRMED, sous_chef.id, max_concurrent=3
    )

    assert decision.kind == RejectKind.CAPACITY_EXCEEDED
    assert "limit of 3" in decision.reason
    assert coordinator.request_status_change(
        pending.id, OrderStatus.CONFIRMED, sous_chef.id, max_concurrent=4
    )


def test_qualified_staff_is_traced(
    kitchen: InMemoryKitchenState,
    validator: WorkflowValidator,
    sample_order: Order,
    grill: Station,
) -> None:
    tracer = EvaluationTracer()
    coordinator = KitchenCoordinator(kitchen, kitchen, kitchen, validator=validator, tracer=tracer)
    kitchen.put_order(sample_order)

    qualified = coordinator.qualified_staff(grill.id, sample_order.id)
    coordinator.qualified_staff(uuid4(), sample_order.id)

    summary = tracer.get_trace_summary()
    assert summary["operation_stats"]["qualified_staff"]["event_count"] == 2
    assert [event["metadata"]["qualified"] for event in summary["events"]] == [len(qualified), 0]
