"""Data models for the kitchen workflow engine."""

from kitchen_flow.models.decision import Decision, RejectKind
from kitchen_flow.models.order import (
    Order,
    OrderItem,
    OrderStatus,
    Priority,
    Recipe,
    RecipeCategory,
    RecipeDifficulty,
)
from kitchen_flow.models.staff import KitchenStation, StaffMember, UserRole
from kitchen_flow.models.station import Station, StationStatus, StationType

__all__ = [
    # Decision
    "Decision",
    "RejectKind",
    # Order
    "Order",
    "OrderItem",
    "OrderStatus",
    "Priority",
    "Recipe",
    "RecipeCategory",
    "RecipeDifficulty",
    # Staff
    "KitchenStation",
    "StaffMember",
    "UserRole",
    # Station
    "Station",
    "StationStatus",
    "StationType",
]
