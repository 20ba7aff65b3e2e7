"""Request tracing for coordinator evaluations."""

import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Generator
from uuid import UUID, uuid4

from kitchen_flow.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class TraceEvent:
    """Individual evaluation recorded by the tracer."""

    timestamp: datetime
    operation: str
    trace_id: UUID
    duration_ms: float | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


class EvaluationTracer:
    """Records the evaluations made on behalf of one caller session."""

    def __init__(self, trace_id: UUID | None = None):
        self.trace_id = trace_id or uuid4()
        self.events: list[TraceEvent] = []
        self.start_time = time.time()

    def add_event(
        self,
        operation: str,
        duration_ms: float | None = None,
        **metadata: Any,
    ) -> None:
        """Add a trace event."""
        event = TraceEvent(
            timestamp=datetime.now(timezone.utc),
            operation=operation,
            trace_id=self.trace_id,
            duration_ms=duration_ms,
            metadata=metadata,
        )
        self.events.append(event)

        logger.debug(
            "trace_event",
            trace_id=str(self.trace_id),
            operation=operation,
            duration_ms=duration_ms,
            **metadata,
        )

    @contextmanager
    def trace_operation(
        self, operation: str, **metadata: Any
    ) -> Generator[dict[str, Any], None, None]:
        """Time an operation; values put in the yielded dict join the event."""
        start = time.time()
        extra: dict[str, Any] = {}
        try:
            yield extra
        finally:
            duration_ms = (time.time() - start) * 1000
            self.add_event(operation, duration_ms=duration_ms, **metadata, **extra)

    def get_trace_summary(self) -> dict[str, Any]:
        """Get a summary of the trace."""
        total_duration = (time.time() - self.start_time) * 1000

        operation_stats: dict[str, dict[str, Any]] = {}
        for event in self.events:
            if event.operation not in operation_stats:
                operation_stats[event.operation] = {
                    "event_count": 0,
                    "total_duration_ms": 0.0,
                }

            operation_stats[event.operation]["event_count"] += 1
            if event.duration_ms:
                operation_stats[event.operation]["total_duration_ms"] += event.duration_ms

        return {
            "trace_id": str(self.trace_id),
            "total_duration_ms": total_duration,
            "total_events": len(self.events),
            "operation_stats": operation_stats,
            "events": [
                {
                    "timestamp": event.timestamp.isoformat(),
                    "operation": event.operation,
                    "duration_ms": event.duration_ms,
                    "metadata": event.metadata,
                }
                for event in self.events
            ],
        }
