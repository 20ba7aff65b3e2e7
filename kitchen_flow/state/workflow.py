"""Order status state machine and per-status role permissions."""

from kitchen_flow.models.decision import Decision, RejectKind
from kitchen_flow.models.order import Order, OrderStatus
from kitchen_flow.models.staff import UserRole


class KitchenFlowError(Exception):
    """Base error for misuse of the workflow engine."""


class InvalidTransitionError(KitchenFlowError):
    """Raised when a status change is applied along an edge the graph lacks."""

    def __init__(self, current: OrderStatus, target: OrderStatus):
        self.current = current
        self.target = target
        super().__init__(
            f"Invalid status transition from {current.value} to {target.value}"
        )


class OrderTransitions:
    """Valid order status transitions and who may trigger them."""

    TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
        OrderStatus.PENDING: frozenset({OrderStatus.CONFIRMED, OrderStatus.CANCELLED}),
        OrderStatus.CONFIRMED: frozenset({OrderStatus.PREPARING, OrderStatus.CANCELLED}),
        OrderStatus.PREPARING: frozenset({OrderStatus.READY, OrderStatus.CANCELLED}),
        OrderStatus.READY: frozenset({OrderStatus.COMPLETED}),
        OrderStatus.COMPLETED: frozenset(),  # Terminal
        OrderStatus.CANCELLED: frozenset(),  # Terminal
    }

    # Roles allowed to move an order into each status. Confirmation is open to
    # sous chef and everyone ranked above; the rest are fixed lists.
    PERMITTED_ROLES: dict[OrderStatus, frozenset[UserRole]] = {
        OrderStatus.PENDING: frozenset(),
        OrderStatus.CONFIRMED: frozenset(
            role for role in UserRole if role.is_at_least(UserRole.SOUS_CHEF)
        ),
        OrderStatus.PREPARING: frozenset(
            {
                UserRole.LINE_COOK,
                UserRole.COOK,
                UserRole.SOUS_CHEF,
                UserRole.KITCHEN_MANAGER,
            }
        ),
        OrderStatus.READY: frozenset(
            {
                UserRole.LINE_COOK,
                UserRole.COOK,
                UserRole.SOUS_CHEF,
                UserRole.KITCHEN_MANAGER,
            }
        ),
        OrderStatus.COMPLETED: frozenset(
            {UserRole.COOK, UserRole.SOUS_CHEF, UserRole.KITCHEN_MANAGER}
        ),
        OrderStatus.CANCELLED: frozenset({UserRole.SOUS_CHEF, UserRole.KITCHEN_MANAGER}),
    }

    @classmethod
    def can_transition(cls, current: OrderStatus, target: OrderStatus) -> bool:
        """Check if a status transition is in the graph."""
        return target in cls.TRANSITIONS[current]

    @classmethod
    def valid_transitions(cls, current: OrderStatus) -> frozenset[OrderStatus]:
        """Get the statuses reachable from `current` in one step."""
        return cls.TRANSITIONS[current]

    @classmethod
    def role_can_set(cls, role: UserRole, target: OrderStatus) -> bool:
        """Check if a role may move an order into `target`."""
        return role in cls.PERMITTED_ROLES[target]

    @classmethod
    def check_guards(cls, order: Order, target: OrderStatus) -> Decision:
        """
        Check the state-dependent preconditions of a status change.

        Args:
            order: Order snapshot being changed
            target: Requested status

        Returns:
            Accepting decision, or a guard_violation rejection naming the
            failed precondition
        """
        if target == OrderStatus.CONFIRMED and not order.items:
            return Decision.reject(
                RejectKind.GUARD_VIOLATION,
                f"Order {order.id} has no items and cannot be confirmed",
            )

        if target == OrderStatus.PREPARING and order.assigned_station_id is None:
            return Decision.reject(
                RejectKind.GUARD_VIOLATION,
                "Cannot start preparing order without assigning to a station",
            )

        if target == OrderStatus.READY and order.status != OrderStatus.PREPARING:
            return Decision.reject(
                RejectKind.GUARD_VIOLATION,
                "Order must be in preparing status before marking as ready",
            )

        if target == OrderStatus.COMPLETED and order.status != OrderStatus.READY:
            return Decision.reject(
                RejectKind.GUARD_VIOLATION,
                "Order must be ready before completing",
            )

        return Decision.accept()


assert set(OrderTransitions.TRANSITIONS) == set(OrderStatus)
assert set(OrderTransitions.PERMITTED_ROLES) == set(OrderStatus)


def transition(order: Order, target: OrderStatus) -> Order:
    """
    Apply an accepted status change to an order snapshot.

    Returns a new snapshot; the input is left untouched.

    Raises:
        InvalidTransitionError: If the graph has no edge to `target`
    """
    if not OrderTransitions.can_transition(order.status, target):
        raise InvalidTransitionError(order.status, target)

    return order.model_copy(update={"status": target})
