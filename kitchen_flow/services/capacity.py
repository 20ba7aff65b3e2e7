"""Kitchen-wide admission control."""

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict

from kitchen_flow.config import Settings
from kitchen_flow.models.decision import Decision, RejectKind
from kitchen_flow.models.order import Order, OrderStatus
from kitchen_flow.models.staff import StaffMember, UserRole
from kitchen_flow.services.base import BaseService

ACTIVE_STATUSES = frozenset({OrderStatus.CONFIRMED, OrderStatus.PREPARING})
SENIOR_STAFF_ROLES = frozenset(
    {UserRole.COOK, UserRole.SOUS_CHEF, UserRole.KITCHEN_MANAGER}
)


class KitchenLoad(BaseModel):
    """Counts the admission rules are evaluated against."""

    model_config = ConfigDict(frozen=True)

    active_orders: int
    active_staff: int
    senior_staff: int
    complex_orders: int

    @classmethod
    def measure(cls, orders: Sequence[Order], staff: Sequence[StaffMember]) -> "KitchenLoad":
        return cls(
            active_orders=sum(1 for order in orders if order.status in ACTIVE_STATUSES),
            active_staff=sum(1 for member in staff if member.is_active),
            senior_staff=sum(1 for member in staff if member.role in SENIOR_STAFF_ROLES),
            complex_orders=sum(1 for order in orders if order.has_complex_items),
        )


class CapacityService(BaseService):
    """
    Decides whether the kitchen as a whole can take on more work.

    Responsibilities:
    - Cap the number of confirmed and preparing orders
    - Keep enough active staff for the active orders
    - Keep enough senior staff for orders with hard items
    """

    def __init__(self, settings: Settings | None = None):
        super().__init__("capacity", settings)

    def check_capacity(
        self,
        orders: Sequence[Order],
        staff: Sequence[StaffMember],
        max_concurrent_orders: int | None = None,
    ) -> Decision:
        """
        Check the kitchen against its admission rules.

        Args:
            orders: Current kitchen orders
            staff: Staff on hand
            max_concurrent_orders: Cap on active orders; defaults to the
                configured value. A cap of 0 closes the kitchen.

        Returns:
            Accepting decision, or a capacity_exceeded rejection

        Raises:
            ValueError: If the cap is negative
        """
        if max_concurrent_orders is None:
            max_concurrent_orders = self.settings.max_concurrent_orders
        if max_concurrent_orders < 0:
            raise ValueError(
                f"max_concurrent_orders cannot be negative, got {max_concurrent_orders}"
            )

        load = KitchenLoad.measure(orders, staff)

        if load.active_orders >= max_concurrent_orders:
            return Decision.reject(
                RejectKind.CAPACITY_EXCEEDED,
                f"{load.active_orders} active orders reach the limit of "
                f"{max_concurrent_orders}",
            )

        orders_per_staff = self.settings.staff_per_active_orders
        if load.active_staff * orders_per_staff < load.active_orders:
            return Decision.reject(
                RejectKind.CAPACITY_EXCEEDED,
                f"{load.active_staff} active staff cannot cover {load.active_orders} "
                f"active orders (1 per {orders_per_staff})",
            )

        complex_per_senior = self.settings.complex_orders_per_senior
        if load.senior_staff * complex_per_senior < load.complex_orders:
            return Decision.reject(
                RejectKind.CAPACITY_EXCEEDED,
                f"{load.senior_staff} senior staff cannot cover {load.complex_orders} "
                f"complex orders (1 per {complex_per_senior})",
            )

        return Decision.accept()

    def validate_capacity(
        self,
        orders: Sequence[Order],
        staff: Sequence[StaffMember],
        max_concurrent_orders: int | None = None,
    ) -> bool:
        """Check if the kitchen can accept more concurrent orders."""
        return self.check_capacity(orders, staff, max_concurrent_orders).accepted
