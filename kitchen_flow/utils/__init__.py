"""Utility modules."""

from kitchen_flow.utils.logging import DecisionLogger, get_logger, setup_logging
from kitchen_flow.utils.tracing import EvaluationTracer

__all__ = ["setup_logging", "get_logger", "DecisionLogger", "EvaluationTracer"]
