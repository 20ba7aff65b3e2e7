"""Order-related data models."""

from decimal import Decimal
from enum import Enum
from typing import Any, ClassVar
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

DIETARY_KEYWORDS = ("allerg", "gluten", "vegan")

# Parallel cooking assumption plus coordination overhead
COORDINATION_OVERHEAD = 1.2


class RecipeCategory(str, Enum):
    """Menu category of a recipe."""

    APPETIZER = "appetizer"
    MAIN = "main"
    DESSERT = "dessert"
    BEVERAGE = "beverage"
    SIDE = "side"


class RecipeDifficulty(str, Enum):
    """How hard a recipe is to prepare."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def weight(self) -> float:
        """Contribution of one item of this difficulty to order complexity."""
        return _DIFFICULTY_WEIGHTS[self]

    @property
    def skill_level(self) -> int:
        """Chef skill level needed for this difficulty."""
        return _DIFFICULTY_SKILL_LEVELS[self]


_DIFFICULTY_WEIGHTS: dict[RecipeDifficulty, float] = {
    RecipeDifficulty.EASY: 1.0,
    RecipeDifficulty.MEDIUM: 2.0,
    RecipeDifficulty.HARD: 3.0,
}

_DIFFICULTY_SKILL_LEVELS: dict[RecipeDifficulty, int] = {
    RecipeDifficulty.EASY: 1,
    RecipeDifficulty.MEDIUM: 2,
    RecipeDifficulty.HARD: 3,
}


class OrderStatus(str, Enum):
    """Order status progression through the kitchen."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    PREPARING = "preparing"
    READY = "ready"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def is_final(self) -> bool:
        """Completed and cancelled orders admit no further transitions."""
        return self in (OrderStatus.COMPLETED, OrderStatus.CANCELLED)

    @property
    def is_active(self) -> bool:
        return not self.is_final

    @property
    def is_in_kitchen(self) -> bool:
        return self in (OrderStatus.CONFIRMED, OrderStatus.PREPARING, OrderStatus.READY)

    @property
    def requires_notification(self) -> bool:
        return self in (OrderStatus.READY, OrderStatus.COMPLETED, OrderStatus.CANCELLED)

    @property
    def sort_order(self) -> int:
        """Display order for kitchen boards (lower shows first)."""
        return _STATUS_SORT_ORDERS[self]

    @property
    def priority_multiplier(self) -> float:
        return _STATUS_PRIORITY_MULTIPLIERS[self]

    @property
    def expected_minutes_to_completion(self) -> int:
        """Expected minutes left in the workflow from this status."""
        return _STATUS_EXPECTED_MINUTES[self]


_STATUS_SORT_ORDERS: dict[OrderStatus, int] = {
    OrderStatus.PREPARING: 1,
    OrderStatus.READY: 2,
    OrderStatus.CONFIRMED: 3,
    OrderStatus.PENDING: 4,
    OrderStatus.COMPLETED: 5,
    OrderStatus.CANCELLED: 6,
}

_STATUS_PRIORITY_MULTIPLIERS: dict[OrderStatus, float] = {
    OrderStatus.PENDING: 1.0,
    OrderStatus.CONFIRMED: 1.2,
    OrderStatus.PREPARING: 1.5,
    OrderStatus.READY: 2.0,
    OrderStatus.COMPLETED: 1.0,
    OrderStatus.CANCELLED: 1.0,
}

_STATUS_EXPECTED_MINUTES: dict[OrderStatus, int] = {
    OrderStatus.PENDING: 25,
    OrderStatus.CONFIRMED: 20,
    OrderStatus.PREPARING: 15,
    OrderStatus.READY: 5,
    OrderStatus.COMPLETED: 0,
    OrderStatus.CANCELLED: 0,
}


class Priority(BaseModel):
    """Urgency level of an order, 1 (low) to 5 (critical)."""

    model_config = ConfigDict(frozen=True)

    LOW: ClassVar[int] = 1
    MEDIUM: ClassVar[int] = 2
    HIGH: ClassVar[int] = 3
    URGENT: ClassVar[int] = 4
    CRITICAL: ClassVar[int] = 5

    level: int = Field(default=2, ge=1, le=5)

    @property
    def name(self) -> str:
        return _PRIORITY_NAMES[self.level]

    @property
    def escalation_timeout_minutes(self) -> int:
        """Minutes an order may wait before it is escalated."""
        return _ESCALATION_TIMEOUTS[self.level]

    @property
    def max_preparation_minutes(self) -> int:
        return _MAX_PREPARATION_MINUTES[self.level]

    @property
    def is_high_priority(self) -> bool:
        return self.level >= self.HIGH

    @property
    def requires_immediate_attention(self) -> bool:
        return self.level >= self.URGENT

    @property
    def can_escalate(self) -> bool:
        return self.level < self.CRITICAL

    def escalate(self) -> "Priority":
        """Return the next priority level, or this one if already critical."""
        if not self.can_escalate:
            return self
        return Priority(level=self.level + 1)

    def is_higher_than(self, other: "Priority") -> bool:
        return self.level > other.level

    def is_lower_than(self, other: "Priority") -> bool:
        return self.level < other.level


_PRIORITY_NAMES = {1: "Low", 2: "Medium", 3: "High", 4: "Urgent", 5: "Critical"}
_ESCALATION_TIMEOUTS = {1: 60, 2: 30, 3: 15, 4: 5, 5: 2}
_MAX_PREPARATION_MINUTES = {1: 45, 2: 30, 3: 20, 4: 10, 5: 5}


class Recipe(BaseModel):
    """Recipe a line item is prepared from."""

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    name: str
    category: RecipeCategory
    difficulty: RecipeDifficulty = RecipeDifficulty.EASY
    allergens: tuple[str, ...] = ()


class OrderItem(BaseModel):
    """Individual line item in an order."""

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    recipe: Recipe
    quantity: int = Field(default=1, ge=1)
    estimated_time_minutes: int = Field(default=10, ge=0)
    special_instructions: str | None = None


class Order(BaseModel):
    """Snapshot of an order as supplied by the order store."""

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    items: tuple[OrderItem, ...] = ()
    status: OrderStatus = OrderStatus.PENDING
    priority: Priority = Field(default_factory=Priority)
    special_instructions: str | None = None
    total_amount: Decimal = Field(default=Decimal("0.00"), ge=0)
    assigned_station_id: UUID | None = None

    @field_validator("priority", mode="before")
    @classmethod
    def coerce_priority(cls, v: Any) -> Any:
        """Accept a bare level in place of a Priority."""
        if isinstance(v, int):
            return Priority(level=v)
        return v

    @property
    def is_completed(self) -> bool:
        return self.status == OrderStatus.COMPLETED

    @property
    def has_special_instructions(self) -> bool:
        return bool(self.special_instructions)

    @property
    def estimated_completion_minutes(self) -> float:
        """Longest item time plus coordination overhead; items cook in parallel."""
        if not self.items:
            return 0.0

        max_time = max(item.estimated_time_minutes for item in self.items)
        return max_time * COORDINATION_OVERHEAD

    @property
    def has_special_dietary_requirements(self) -> bool:
        if any(item.recipe.allergens for item in self.items):
            return True

        instructions = (self.special_instructions or "").lower()
        return any(keyword in instructions for keyword in DIETARY_KEYWORDS)

    @property
    def has_complex_items(self) -> bool:
        return any(item.recipe.difficulty == RecipeDifficulty.HARD for item in self.items)

    @property
    def required_skill_level(self) -> int:
        """Skill level of the hardest item (1 for an empty order)."""
        if not self.items:
            return RecipeDifficulty.EASY.skill_level
        return max(item.recipe.difficulty.skill_level for item in self.items)

    @property
    def is_high_priority(self) -> bool:
        return self.priority.requires_immediate_attention

    @property
    def requires_special_attention(self) -> bool:
        return (
            self.total_amount > Decimal("100")
            or self.has_complex_items
            or self.has_special_instructions
        )
