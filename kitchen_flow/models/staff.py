"""Kitchen staff and role models."""

from enum import Enum
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class KitchenStation(str, Enum):
    """Kitchen work positions a staff member can be qualified for."""

    GRILL = "grill"
    SAUTE = "saute"
    FRYER = "fryer"
    SALAD = "salad"
    PASTRY = "pastry"
    PREP = "prep"
    DISH = "dish"
    EXPO = "expo"


class UserRole(str, Enum):
    """Kitchen roles, ranked explicitly by `rank` rather than declaration order."""

    DISHWASHER = "dishwasher"
    PREP_COOK = "prep_cook"
    LINE_COOK = "line_cook"
    COOK = "cook"
    COOK_SENIOR = "cook_senior"
    CHEF_ASSISTANT = "chef_assistant"
    SOUS_CHEF = "sous_chef"
    CHEF_HEAD = "chef_head"
    EXPEDITER = "expediter"
    KITCHEN_MANAGER = "kitchen_manager"
    GENERAL_MANAGER = "general_manager"
    ADMIN = "admin"

    @property
    def rank(self) -> int:
        return ROLE_RANKS[self]

    def is_at_least(self, other: "UserRole") -> bool:
        """Check if this role sits at or above `other` in the hierarchy."""
        return self.rank >= other.rank

    @property
    def stations(self) -> frozenset[KitchenStation]:
        """Kitchen positions this role is qualified to work."""
        return ROLE_STATIONS[self]


ROLE_RANKS: dict[UserRole, int] = {
    UserRole.DISHWASHER: 0,
    UserRole.PREP_COOK: 1,
    UserRole.LINE_COOK: 1,
    UserRole.COOK: 2,
    UserRole.EXPEDITER: 2,
    UserRole.COOK_SENIOR: 3,
    UserRole.CHEF_ASSISTANT: 3,
    UserRole.SOUS_CHEF: 4,
    UserRole.CHEF_HEAD: 5,
    UserRole.KITCHEN_MANAGER: 6,
    UserRole.GENERAL_MANAGER: 7,
    UserRole.ADMIN: 8,
}

_ALL_STATIONS = frozenset(KitchenStation)

ROLE_STATIONS: dict[UserRole, frozenset[KitchenStation]] = {
    UserRole.DISHWASHER: frozenset({KitchenStation.DISH, KitchenStation.PREP}),
    UserRole.PREP_COOK: frozenset(
        {KitchenStation.PREP, KitchenStation.SALAD, KitchenStation.DISH}
    ),
    UserRole.LINE_COOK: frozenset(
        {
            KitchenStation.GRILL,
            KitchenStation.SAUTE,
            KitchenStation.FRYER,
            KitchenStation.PREP,
            KitchenStation.SALAD,
        }
    ),
    UserRole.COOK: frozenset(
        {
            KitchenStation.GRILL,
            KitchenStation.SAUTE,
            KitchenStation.FRYER,
            KitchenStation.SALAD,
            KitchenStation.PREP,
            KitchenStation.EXPO,
        }
    ),
    # Senior cooks add pastry and dish to the line positions
    UserRole.COOK_SENIOR: _ALL_STATIONS,
    UserRole.CHEF_ASSISTANT: _ALL_STATIONS,
    UserRole.SOUS_CHEF: _ALL_STATIONS,
    UserRole.CHEF_HEAD: _ALL_STATIONS,
    UserRole.EXPEDITER: frozenset(
        {KitchenStation.EXPO, KitchenStation.GRILL, KitchenStation.SAUTE}
    ),
    UserRole.KITCHEN_MANAGER: _ALL_STATIONS,
    UserRole.GENERAL_MANAGER: _ALL_STATIONS,
    UserRole.ADMIN: _ALL_STATIONS,
}

assert set(ROLE_RANKS) == set(UserRole), "every role needs a rank"
assert set(ROLE_STATIONS) == set(UserRole), "every role needs a station set"


class StaffMember(BaseModel):
    """Snapshot of a staff member as supplied by the user store."""

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    name: str
    role: UserRole
    is_active: bool = True

    def can_work_at(self, station: KitchenStation) -> bool:
        """Check if the staff member's role covers a kitchen position."""
        return station in self.role.stations
