"""Workflow validator - the single entry point for kitchen policy decisions."""

from collections.abc import Collection, Mapping, Sequence
from uuid import UUID

from kitchen_flow.config import Settings
from kitchen_flow.models.decision import Decision, RejectKind
from kitchen_flow.models.order import Order, OrderStatus, Priority
from kitchen_flow.models.staff import StaffMember, UserRole
from kitchen_flow.models.station import Station
from kitchen_flow.services.assignment import OrderAssignmentService
from kitchen_flow.services.base import BaseService
from kitchen_flow.services.capacity import ACTIVE_STATUSES, CapacityService
from kitchen_flow.services.qualification import StaffQualificationService
from kitchen_flow.state.workflow import OrderTransitions

ASSIGNABLE_STATUSES = frozenset({OrderStatus.PENDING, OrderStatus.CONFIRMED})
CRITICAL_PRIORITY_ROLES = frozenset(
    {UserRole.KITCHEN_MANAGER, UserRole.GENERAL_MANAGER, UserRole.ADMIN}
)


class WorkflowValidator(BaseService):
    """
    Accepts or rejects proposed changes to the kitchen workflow.

    Composes the status transition table, the assignment engine, the staff
    qualification checker and capacity admission control. Each operation
    returns a Decision; nothing here mutates the snapshots it is given.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        assignment: OrderAssignmentService | None = None,
        qualification: StaffQualificationService | None = None,
        capacity: CapacityService | None = None,
    ):
        super().__init__("workflow_validator", settings)
        self.assignment = assignment or OrderAssignmentService(self.settings)
        self.qualification = qualification or StaffQualificationService(self.settings)
        self.capacity = capacity or CapacityService(self.settings)

    def evaluate_status_change(
        self,
        order: Order,
        target: OrderStatus,
        requesting_user: StaffMember,
    ) -> Decision:
        """
        Evaluate a request to move an order to a new status.

        The transition graph is checked first, then the state guards, then
        the requester's role. Guard failures therefore win over missing
        permissions.

        Args:
            order: Current order snapshot
            target: Requested status
            requesting_user: Staff member asking for the change

        Returns:
            Accepting decision, or an invalid_transition, guard_violation or
            unauthorized rejection
        """
        decision = self._check_status_change(order, target, requesting_user)
        return self.record(
            "status_change",
            decision,
            order_id=str(order.id),
            current=order.status.value,
            target=target.value,
            role=requesting_user.role.value,
        )

    def _check_status_change(
        self,
        order: Order,
        target: OrderStatus,
        requesting_user: StaffMember,
    ) -> Decision:
        if not OrderTransitions.can_transition(order.status, target):
            allowed = sorted(
                status.value for status in OrderTransitions.valid_transitions(order.status)
            )
            return Decision.reject(
                RejectKind.INVALID_TRANSITION,
                f"Invalid status transition from {order.status.value} to {target.value} "
                f"(allowed: {', '.join(allowed) or 'none'})",
            )

        guards = OrderTransitions.check_guards(order, target)
        if not guards:
            return guards

        if not requesting_user.is_active:
            return Decision.reject(
                RejectKind.UNAUTHORIZED,
                f"{requesting_user.name} is not an active staff member",
            )

        if not OrderTransitions.role_can_set(requesting_user.role, target):
            return Decision.reject(
                RejectKind.UNAUTHORIZED,
                f"{requesting_user.role.value} cannot mark orders as {target.value}",
            )

        return Decision.accept()

    def evaluate_order_intake(
        self,
        order: Order,
        target: OrderStatus,
        requesting_user: StaffMember,
        orders: Sequence[Order],
        staff: Sequence[StaffMember],
        max_concurrent: int | None = None,
    ) -> Decision:
        """
        Evaluate a status change together with kitchen capacity.

        Capacity admission runs only after the status change itself is
        accepted, and only when the change brings the order into the active
        set (e.g. pending to confirmed). Moving between active statuses
        leaves the active count unchanged and skips the capacity rules.

        Args:
            order: Current order snapshot
            target: Requested status
            requesting_user: Staff member asking for the change
            orders: Current kitchen orders
            staff: Staff on hand
            max_concurrent: Cap on active orders; defaults to the configured value

        Returns:
            The status change decision, or a capacity_exceeded rejection
        """
        decision = self.evaluate_status_change(order, target, requesting_user)
        if not decision or not self._adds_active_order(order, target):
            return decision

        return self.evaluate_capacity(orders, staff, max_concurrent)

    @staticmethod
    def _adds_active_order(order: Order, target: OrderStatus) -> bool:
        return order.status not in ACTIVE_STATUSES and target in ACTIVE_STATUSES

    def evaluate_assignment(
        self,
        order: Order,
        station: Station,
        station_orders: Sequence[Order],
    ) -> Decision:
        """
        Evaluate a request to assign an order to a station.

        Only pending and confirmed orders can be (re)assigned.
        """
        if order.status not in ASSIGNABLE_STATUSES:
            decision = Decision.reject(
                RejectKind.GUARD_VIOLATION,
                f"Order {order.id} cannot be assigned (status: {order.status.value})",
            )
        else:
            decision = self.assignment.check_assignment(order, station, station_orders)

        return self.record(
            "assignment",
            decision,
            order_id=str(order.id),
            station_id=str(station.id),
            station_orders=len(station_orders),
        )

    def find_best_station(
        self,
        order: Order,
        stations: Sequence[Station],
        orders_by_station: Mapping[UUID, Sequence[Order]],
    ) -> Station | None:
        """Find the best eligible station for an order, or None."""
        return self.assignment.find_optimal_station(order, stations, orders_by_station)

    def evaluate_staff_assignment(
        self,
        staff: StaffMember,
        station: Station,
        order: Order,
    ) -> Decision:
        """Evaluate whether a staff member may work an order at a station."""
        decision = self.qualification.check_staff(staff, station, order)
        return self.record(
            "staff_assignment",
            decision,
            staff_id=str(staff.id),
            station_id=str(station.id),
            order_id=str(order.id),
        )

    def evaluate_capacity(
        self,
        orders: Sequence[Order],
        staff: Sequence[StaffMember],
        max_concurrent: int | None = None,
    ) -> Decision:
        """Evaluate whether the kitchen can take on more active orders."""
        decision = self.capacity.check_capacity(orders, staff, max_concurrent)
        return self.record(
            "capacity",
            decision,
            orders=len(orders),
            staff=len(staff),
            max_concurrent=(
                self.settings.max_concurrent_orders if max_concurrent is None else max_concurrent
            ),
        )

    def evaluate_priority_change(
        self,
        order: Order,
        new_priority: Priority,
        requesting_user: StaffMember,
    ) -> Decision:
        """
        Evaluate a request to change an order's priority.

        Critical-priority permission is checked first, then the preparing
        downgrade rule, then whether the order is final.

        Args:
            order: Current order snapshot
            new_priority: Requested priority
            requesting_user: Staff member asking for the change

        Returns:
            Accepting decision, or an unauthorized or guard_violation
            rejection
        """
        if (
            new_priority.level == Priority.CRITICAL
            and requesting_user.role not in CRITICAL_PRIORITY_ROLES
        ):
            decision = Decision.reject(
                RejectKind.UNAUTHORIZED,
                "Only managers and admins can set critical priority",
            )
        elif order.status == OrderStatus.PREPARING and new_priority.is_lower_than(order.priority):
            decision = Decision.reject(
                RejectKind.GUARD_VIOLATION,
                "Cannot decrease priority for orders in preparation",
            )
        elif order.status.is_final:
            decision = Decision.reject(
                RejectKind.GUARD_VIOLATION,
                "Cannot change priority for completed or cancelled orders",
            )
        else:
            decision = Decision.accept()

        return self.record(
            "priority_change",
            decision,
            order_id=str(order.id),
            current=order.priority.level,
            target=new_priority.level,
            role=requesting_user.role.value,
        )

    def evaluate_special_handling(
        self,
        order: Order,
        chef: StaffMember,
        equipment: Collection[str],
    ) -> Decision:
        """Evaluate dietary, VIP and high-value handling for an assigned chef."""
        decision = self.qualification.check_special_handling(order, chef, equipment)
        return self.record(
            "special_handling",
            decision,
            order_id=str(order.id),
            chef_id=str(chef.id),
        )
