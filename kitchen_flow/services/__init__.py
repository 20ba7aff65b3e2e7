"""Policy services for order assignment and workflow validation."""

from kitchen_flow.services.assignment import OrderAssignmentService
from kitchen_flow.services.base import BaseService
from kitchen_flow.services.capacity import CapacityService, KitchenLoad
from kitchen_flow.services.coordinator import KitchenCoordinator
from kitchen_flow.services.qualification import StaffQualificationService
from kitchen_flow.services.scoring import order_complexity
from kitchen_flow.services.workflow_validator import WorkflowValidator

__all__ = [
    "BaseService",
    "CapacityService",
    "KitchenLoad",
    "KitchenCoordinator",
    "OrderAssignmentService",
    "StaffQualificationService",
    "WorkflowValidator",
    "order_complexity",
]
