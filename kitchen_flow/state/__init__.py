"""State machine and storage-facing lookup contracts."""

from kitchen_flow.state.repositories import (
    InMemoryKitchenState,
    OrderLookup,
    StationLookup,
    UserLookup,
)
from kitchen_flow.state.workflow import (
    InvalidTransitionError,
    KitchenFlowError,
    OrderTransitions,
    transition,
)

__all__ = [
    "InMemoryKitchenState",
    "InvalidTransitionError",
    "KitchenFlowError",
    "OrderLookup",
    "OrderTransitions",
    "StationLookup",
    "UserLookup",
    "transition",
]
