"""Accept/reject results returned by the workflow services."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, model_validator


class RejectKind(str, Enum):
    """Why a request was rejected."""

    INVALID_TRANSITION = "invalid_transition"
    GUARD_VIOLATION = "guard_violation"
    UNAUTHORIZED = "unauthorized"
    CAPACITY_EXCEEDED = "capacity_exceeded"
    STATION_INCOMPATIBLE = "station_incompatible"
    STAFF_UNQUALIFIED = "staff_unqualified"


class Decision(BaseModel):
    """Outcome of a policy check.

    Rejections carry the kind of rule that failed and a readable reason.
    Truthiness follows `accepted`.
    """

    model_config = ConfigDict(frozen=True)

    accepted: bool
    kind: RejectKind | None = None
    reason: str = ""

    @model_validator(mode="after")
    def check_kind(self) -> "Decision":
        """Rejections carry a kind, acceptances don't."""
        if self.accepted and self.kind is not None:
            raise ValueError("Accepted decisions cannot carry a reject kind")
        if not self.accepted and self.kind is None:
            raise ValueError("Rejected decisions need a reject kind")
        return self

    @classmethod
    def accept(cls) -> "Decision":
        return cls(accepted=True)

    @classmethod
    def reject(cls, kind: RejectKind, reason: str) -> "Decision":
        return cls(accepted=False, kind=kind, reason=reason)

    def __bool__(self) -> bool:
        return self.accepted
