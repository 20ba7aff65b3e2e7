"""Pytest configuration and fixtures."""

from decimal import Decimal
from typing import Any, Callable
from uuid import uuid4

import pytest

from kitchen_flow.config import Settings
from kitchen_flow.models.order import (
    Order,
    OrderItem,
    OrderStatus,
    Recipe,
    RecipeCategory,
    RecipeDifficulty,
)
from kitchen_flow.models.staff import StaffMember, UserRole
from kitchen_flow.models.station import Station, StationStatus, StationType
from kitchen_flow.services.workflow_validator import WorkflowValidator


@pytest.fixture
def settings() -> Settings:
    """Settings with defaults, independent of the environment."""
    return Settings(_env_file=None)


@pytest.fixture
def validator(settings: Settings) -> WorkflowValidator:
    """Create a workflow validator."""
    return WorkflowValidator(settings)


# Sample data fixtures


@pytest.fixture
def burger() -> Recipe:
    """An easy main course."""
    return Recipe(
        name="Cheeseburger",
        category=RecipeCategory.MAIN,
        difficulty=RecipeDifficulty.EASY,
    )


@pytest.fixture
def beef_wellington() -> Recipe:
    """A hard main course."""
    return Recipe(
        name="Beef Wellington",
        category=RecipeCategory.MAIN,
        difficulty=RecipeDifficulty.HARD,
    )


@pytest.fixture
def peanut_salad() -> Recipe:
    """An appetizer with allergens."""
    return Recipe(
        name="Thai Peanut Salad",
        category=RecipeCategory.APPETIZER,
        difficulty=RecipeDifficulty.EASY,
        allergens=("peanuts",),
    )


@pytest.fixture
def lemonade() -> Recipe:
    """A beverage."""
    return Recipe(name="Lemonade", category=RecipeCategory.BEVERAGE)


@pytest.fixture
def make_order(burger: Recipe) -> Callable[..., Order]:
    """Build orders; defaults to two easy burgers at priority 2."""

    def _make_order(
        recipes: list[Recipe] | None = None,
        minutes: int = 10,
        **kwargs: Any,
    ) -> Order:
        if recipes is None:
            recipes = [burger, burger]
        items = tuple(
            OrderItem(recipe=recipe, estimated_time_minutes=minutes) for recipe in recipes
        )
        kwargs.setdefault("priority", 2)
        return Order(items=items, **kwargs)

    return _make_order


@pytest.fixture
def sample_order(make_order: Callable[..., Order]) -> Order:
    """Two easy mains, priority 2, no special instructions."""
    return make_order()


@pytest.fixture
def high_value_order(make_order: Callable[..., Order]) -> Order:
    """Sample order worth 150.00."""
    return make_order(total_amount=Decimal("150.00"))


@pytest.fixture
def preparing_order(make_order: Callable[..., Order]) -> Order:
    """Order already on a station and being prepared."""
    return make_order(status=OrderStatus.PREPARING, assigned_station_id=uuid4())


@pytest.fixture
def make_station() -> Callable[..., Station]:
    """Build stations; defaults to an available station with capacity 5."""

    def _make_station(station_type: StationType, **kwargs: Any) -> Station:
        kwargs.setdefault("name", f"{station_type.value.title()} Station")
        return Station(station_type=station_type, **kwargs)

    return _make_station


@pytest.fixture
def grill_station(make_station: Callable[..., Station]) -> Station:
    return make_station(StationType.GRILL, status=StationStatus.AVAILABLE, capacity=5)


@pytest.fixture
def beverage_station(make_station: Callable[..., Station]) -> Station:
    return make_station(StationType.BEVERAGE, capacity=5)


@pytest.fixture
def make_staff() -> Callable[..., StaffMember]:
    """Build staff members by role."""

    def _make_staff(role: UserRole, **kwargs: Any) -> StaffMember:
        kwargs.setdefault("name", f"Test {role.value.replace('_', ' ').title()}")
        return StaffMember(role=role, **kwargs)

    return _make_staff
