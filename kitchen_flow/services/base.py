"""Base service class with common functionality for all workflow services."""

from typing import Any

from kitchen_flow.config import Settings, get_settings
from kitchen_flow.models.decision import Decision
from kitchen_flow.utils.logging import DecisionLogger


class BaseService:
    """Base class for the stateless policy services.

    Services hold configuration and a logger only. Every check works on the
    snapshots passed in and keeps nothing between calls.
    """

    def __init__(self, service_id: str, settings: Settings | None = None):
        self.service_id = service_id
        self.settings = settings or get_settings()
        self.logger = DecisionLogger(service_id)

    def record(self, operation: str, decision: Decision, **context: Any) -> Decision:
        """Log a decision and hand it back to the caller."""
        self.logger.log_decision(operation, decision, **context)
        return decision
