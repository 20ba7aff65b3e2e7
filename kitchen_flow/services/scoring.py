"""Order complexity scoring and per-station-type capability tables."""

from collections.abc import Iterable

from kitchen_flow.models.order import Order, RecipeCategory
from kitchen_flow.models.staff import KitchenStation
from kitchen_flow.models.station import StationType

ITEM_COMPLEXITY = 0.5
SPECIAL_INSTRUCTIONS_COMPLEXITY = 1.5
PRIORITY_COMPLEXITY = 0.5

MAX_COMPLEXITY: dict[StationType, float] = {
    StationType.PREP: 5.0,
    StationType.SALAD: 6.0,
    StationType.BEVERAGE: 4.0,
    StationType.FRYER: 7.0,
    StationType.GRILL: 8.0,
    StationType.DESSERT: 9.0,
}

# Minutes of queued work a station can absorb
MAX_WORKLOAD: dict[StationType, float] = {
    StationType.PREP: 480.0,
    StationType.SALAD: 360.0,
    StationType.BEVERAGE: 300.0,
    StationType.FRYER: 420.0,
    StationType.GRILL: 450.0,
    StationType.DESSERT: 400.0,
}

COMPATIBLE_CATEGORIES: dict[StationType, frozenset[RecipeCategory]] = {
    StationType.GRILL: frozenset({RecipeCategory.MAIN}),
    StationType.PREP: frozenset(RecipeCategory),
    StationType.FRYER: frozenset(
        {RecipeCategory.MAIN, RecipeCategory.APPETIZER, RecipeCategory.SIDE}
    ),
    StationType.SALAD: frozenset({RecipeCategory.APPETIZER, RecipeCategory.SIDE}),
    StationType.DESSERT: frozenset({RecipeCategory.DESSERT}),
    StationType.BEVERAGE: frozenset({RecipeCategory.BEVERAGE}),
}

# Prep takes anything but specializes in nothing
SPECIALIZED_CATEGORIES: dict[StationType, frozenset[RecipeCategory]] = {
    StationType.GRILL: frozenset({RecipeCategory.MAIN}),
    StationType.PREP: frozenset(),
    StationType.FRYER: frozenset({RecipeCategory.MAIN, RecipeCategory.APPETIZER}),
    StationType.SALAD: frozenset({RecipeCategory.APPETIZER, RecipeCategory.SIDE}),
    StationType.DESSERT: frozenset({RecipeCategory.DESSERT}),
    StationType.BEVERAGE: frozenset({RecipeCategory.BEVERAGE}),
}

# Beverage has no position of its own; salad is the closest cold station
KITCHEN_STATIONS: dict[StationType, KitchenStation] = {
    StationType.GRILL: KitchenStation.GRILL,
    StationType.PREP: KitchenStation.PREP,
    StationType.FRYER: KitchenStation.FRYER,
    StationType.SALAD: KitchenStation.SALAD,
    StationType.DESSERT: KitchenStation.PASTRY,
    StationType.BEVERAGE: KitchenStation.SALAD,
}

for _table in (
    MAX_COMPLEXITY,
    MAX_WORKLOAD,
    COMPATIBLE_CATEGORIES,
    SPECIALIZED_CATEGORIES,
    KITCHEN_STATIONS,
):
    assert set(_table) == set(StationType), "station tables must cover every type"


def order_complexity(order: Order) -> float:
    """
    Score how demanding an order is to prepare.

    Each item adds a flat amount plus its difficulty weight; special
    instructions and the priority level add on top. The result is never
    negative and only grows with item count, difficulty and priority.
    """
    complexity = len(order.items) * ITEM_COMPLEXITY
    complexity += sum(item.recipe.difficulty.weight for item in order.items)

    if order.has_special_instructions:
        complexity += SPECIAL_INSTRUCTIONS_COMPLEXITY

    complexity += order.priority.level * PRIORITY_COMPLEXITY

    return complexity


def max_complexity(station_type: StationType) -> float:
    return MAX_COMPLEXITY[station_type]


def max_workload(station_type: StationType) -> float:
    return MAX_WORKLOAD[station_type]


def is_compatible(station_type: StationType, category: RecipeCategory) -> bool:
    """Check if a station type can cook a recipe category."""
    return category in COMPATIBLE_CATEGORIES[station_type]


def is_specialized(station_type: StationType, category: RecipeCategory) -> bool:
    """Check if a station type is the preferred place for a recipe category."""
    return category in SPECIALIZED_CATEGORIES[station_type]


def station_to_kitchen_station(station_type: StationType) -> KitchenStation:
    return KITCHEN_STATIONS[station_type]


def station_workload(orders: Iterable[Order]) -> float:
    """Sum the estimated minutes of every order a station has not completed."""
    return sum(
        (order.estimated_completion_minutes for order in orders if not order.is_completed),
        0.0,
    )
