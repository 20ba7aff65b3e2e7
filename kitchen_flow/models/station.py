"""Kitchen station models."""

from enum import Enum
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class StationType(str, Enum):
    """Kind of work a station is set up for."""

    GRILL = "grill"
    PREP = "prep"
    FRYER = "fryer"
    SALAD = "salad"
    DESSERT = "dessert"
    BEVERAGE = "beverage"


class StationStatus(str, Enum):
    """Station operating states."""

    AVAILABLE = "available"
    BUSY = "busy"
    MAINTENANCE = "maintenance"
    OFFLINE = "offline"


class Station(BaseModel):
    """Snapshot of a kitchen work area."""

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    name: str
    station_type: StationType
    status: StationStatus = StationStatus.AVAILABLE
    capacity: int = Field(default=5, ge=1)
    current_workload: int = Field(default=0, ge=0)
    equipment: tuple[str, ...] = ()

    @property
    def is_available(self) -> bool:
        """Check if station accepts new orders."""
        return self.status == StationStatus.AVAILABLE

    @property
    def workload_ratio(self) -> float:
        return self.current_workload / self.capacity
