"""Staff qualification checks for station and order assignments."""

from collections.abc import Collection
from decimal import Decimal

from kitchen_flow.config import Settings
from kitchen_flow.models.decision import Decision, RejectKind
from kitchen_flow.models.order import Order
from kitchen_flow.models.staff import StaffMember, UserRole
from kitchen_flow.models.station import Station
from kitchen_flow.services.base import BaseService
from kitchen_flow.services.scoring import order_complexity, station_to_kitchen_station

DEFAULT_EXPERIENCE_LEVEL = 1.0

EXPERIENCE_LEVELS: dict[UserRole, float] = {
    UserRole.DISHWASHER: 2.0,
    UserRole.LINE_COOK: 5.0,
    UserRole.COOK: 7.0,
    UserRole.SOUS_CHEF: 9.0,
    UserRole.KITCHEN_MANAGER: 10.0,
}

# Dietary training comes with cook rank, seniority with sous chef rank
DIETARY_TRAINED_ROLES = frozenset(
    role for role in UserRole if role.is_at_least(UserRole.COOK)
)
SENIOR_ROLES = frozenset(role for role in UserRole if role.is_at_least(UserRole.SOUS_CHEF))

# Chefs trusted with VIP and high-value orders during special handling
SPECIAL_HANDLING_ROLES = frozenset(
    {UserRole.COOK, UserRole.SOUS_CHEF, UserRole.KITCHEN_MANAGER}
)
ALLERGEN_FREE_EQUIPMENT = frozenset(
    {"allergen_free_prep_area", "dedicated_gluten_free_station"}
)


def experience_level(role: UserRole) -> float:
    """Highest order complexity a role is trusted with."""
    return EXPERIENCE_LEVELS.get(role, DEFAULT_EXPERIENCE_LEVEL)


class StaffQualificationService(BaseService):
    """
    Decides whether a staff member can work a given order at a given station.

    Responsibilities:
    - Match the staff role against the station's kitchen position
    - Compare order complexity with the role's experience level
    - Require trained staff for dietary orders and senior staff for
      high-value orders
    """

    def __init__(self, settings: Settings | None = None):
        super().__init__("staff_qualification", settings)

    @property
    def high_value_threshold(self) -> Decimal:
        return Decimal(str(self.settings.high_value_order_threshold))

    @property
    def vip_threshold(self) -> Decimal:
        return Decimal(str(self.settings.vip_order_threshold))

    def is_vip(self, order: Order) -> bool:
        """VIP orders are large or urgent."""
        return order.total_amount > self.vip_threshold or order.is_high_priority

    def check_staff(
        self,
        staff: StaffMember,
        station: Station,
        order: Order,
    ) -> Decision:
        """
        Check whether a staff member may handle an order at a station.

        Checks run in order and stop at the first failure.

        Args:
            staff: Staff member snapshot
            station: Station the order is assigned to
            order: Order to be prepared

        Returns:
            Accepting decision, or a staff_unqualified rejection
        """
        if not staff.is_active:
            return Decision.reject(
                RejectKind.STAFF_UNQUALIFIED,
                f"{staff.name} is not an active staff member",
            )

        position = station_to_kitchen_station(station.station_type)
        if not staff.can_work_at(position):
            return Decision.reject(
                RejectKind.STAFF_UNQUALIFIED,
                f"{staff.role.value} cannot work the {position.value} position "
                f"at station {station.name}",
            )

        complexity = order_complexity(order)
        level = experience_level(staff.role)
        if complexity > level:
            return Decision.reject(
                RejectKind.STAFF_UNQUALIFIED,
                f"Order complexity {complexity:.1f} exceeds {staff.role.value} "
                f"experience level {level:.1f}",
            )

        if order.has_special_dietary_requirements and staff.role not in DIETARY_TRAINED_ROLES:
            return Decision.reject(
                RejectKind.STAFF_UNQUALIFIED,
                f"Order has dietary requirements; {staff.role.value} lacks dietary training",
            )

        if order.total_amount > self.high_value_threshold and staff.role not in SENIOR_ROLES:
            return Decision.reject(
                RejectKind.STAFF_UNQUALIFIED,
                f"Orders above {self.high_value_threshold} need senior staff, "
                f"not {staff.role.value}",
            )

        return Decision.accept()

    def can_staff_handle(
        self,
        staff: StaffMember,
        station: Station,
        order: Order,
    ) -> bool:
        """Check if a staff member can handle an order at a station."""
        return self.check_staff(staff, station, order).accepted

    def check_special_handling(
        self,
        order: Order,
        chef: StaffMember,
        equipment: Collection[str],
    ) -> Decision:
        """
        Check dietary, VIP and high-value handling for an assigned chef.

        Args:
            order: Order being prepared
            chef: Chef the order is assigned to
            equipment: Equipment available to the chef

        Returns:
            Accepting decision, or a staff_unqualified rejection
        """
        if order.has_special_dietary_requirements:
            if chef.role not in DIETARY_TRAINED_ROLES:
                return Decision.reject(
                    RejectKind.STAFF_UNQUALIFIED,
                    f"{chef.role.value} cannot handle dietary restrictions",
                )

            if not ALLERGEN_FREE_EQUIPMENT.intersection(equipment):
                return Decision.reject(
                    RejectKind.STAFF_UNQUALIFIED,
                    "Dietary orders need an allergen-free prep area or a "
                    "dedicated gluten-free station",
                )

        if self.is_vip(order) and chef.role not in SPECIAL_HANDLING_ROLES:
            return Decision.reject(
                RejectKind.STAFF_UNQUALIFIED,
                f"{chef.role.value} is not qualified for VIP orders",
            )

        if order.total_amount > self.high_value_threshold and chef.role not in SPECIAL_HANDLING_ROLES:
            return Decision.reject(
                RejectKind.STAFF_UNQUALIFIED,
                f"{chef.role.value} cannot handle orders above {self.high_value_threshold}",
            )

        return Decision.accept()
