"""Structured logging configuration."""

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog
from pythonjsonlogger import jsonlogger

from kitchen_flow.config import get_settings

if TYPE_CHECKING:
    from kitchen_flow.models.decision import Decision


def setup_logging() -> None:
    """Configure structured logging for the engine."""
    settings = get_settings()

    # Configure standard library logging
    log_level = getattr(logging, settings.log_level)

    if settings.log_format == "json":
        # JSON logging for production
        handler = logging.StreamHandler(sys.stdout)
        formatter = jsonlogger.JsonFormatter(
            fmt="%(timestamp)s %(level)s %(name)s %(message)s",
            rename_fields={"levelname": "level", "asctime": "timestamp"},
        )
        handler.setFormatter(formatter)
    else:
        # Human-readable logging for development
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.JSONRenderer() if settings.log_format == "json"
            else structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


class DecisionLogger:
    """Logger for accept/reject outcomes of the workflow services."""

    def __init__(self, service_id: str):
        self.service_id = service_id
        self.logger = get_logger(service_id)

    def log_decision(
        self,
        operation: str,
        decision: "Decision",
        **kwargs: Any,
    ) -> None:
        """Log a policy decision. Rejections are logged at info level."""
        log_data = {
            "service_id": self.service_id,
            "operation": operation,
            "accepted": decision.accepted,
        }

        if not decision.accepted:
            log_data["kind"] = decision.kind.value if decision.kind else None
            log_data["reason"] = decision.reason

        log_data.update(kwargs)

        if decision.accepted:
            self.logger.debug("decision", **log_data)
        else:
            self.logger.info("decision", **log_data)

    def log_selection(
        self,
        order_id: str,
        station_id: str | None,
        score: float | None,
        candidates: int,
        **kwargs: Any,
    ) -> None:
        """Log the outcome of a best-station search."""
        self.logger.info(
            "station_selected" if station_id else "no_station_eligible",
            service_id=self.service_id,
            order_id=order_id,
            station_id=station_id,
            score=score,
            candidates=candidates,
            **kwargs,
        )

