"""Order-to-station assignment: eligibility checks and best-station search."""

from collections.abc import Mapping, Sequence
from uuid import UUID

from kitchen_flow.config import Settings
from kitchen_flow.models.decision import Decision, RejectKind
from kitchen_flow.models.order import Order
from kitchen_flow.models.station import Station
from kitchen_flow.services.base import BaseService
from kitchen_flow.services.scoring import (
    is_compatible,
    is_specialized,
    max_complexity,
    max_workload,
    order_complexity,
    station_workload,
)

BASE_SCORE = 100.0
WORKLOAD_PENALTY = 30.0
FREE_CAPACITY_BONUS = 20.0
SPECIALIZATION_BONUS = 20.0
COMPLEXITY_MISMATCH_PENALTY = 15.0
# Orders above this share of a station's max complexity count as a poor fit
COMPLEXITY_MISMATCH_RATIO = 0.8


class OrderAssignmentService(BaseService):
    """
    Decides which stations may take an order and which one should.

    Responsibilities:
    - Check station availability, capacity and category compatibility
    - Check order complexity and queued workload against station limits
    - Score eligible stations and pick the best one
    """

    def __init__(self, settings: Settings | None = None):
        super().__init__("order_assignment", settings)

    def check_assignment(
        self,
        order: Order,
        station: Station,
        current_orders: Sequence[Order],
    ) -> Decision:
        """
        Check whether a station can take an order right now.

        Args:
            order: Order to place
            station: Candidate station
            current_orders: Orders currently assigned to the station

        Returns:
            Accepting decision, or the first failed rule as a rejection
        """
        if not station.is_available:
            return Decision.reject(
                RejectKind.STATION_INCOMPATIBLE,
                f"Station {station.name} is not available (status: {station.status.value})",
            )

        if len(current_orders) >= station.capacity:
            return Decision.reject(
                RejectKind.CAPACITY_EXCEEDED,
                f"Station {station.name} is at full capacity ({station.capacity} orders)",
            )

        for item in order.items:
            if not is_compatible(station.station_type, item.recipe.category):
                return Decision.reject(
                    RejectKind.STATION_INCOMPATIBLE,
                    f"Station {station.name} ({station.station_type.value}) cannot "
                    f"prepare {item.recipe.category.value} item '{item.recipe.name}'",
                )

        complexity = order_complexity(order)
        complexity_limit = max_complexity(station.station_type)
        if complexity > complexity_limit:
            return Decision.reject(
                RejectKind.STATION_INCOMPATIBLE,
                f"Order complexity {complexity:.1f} exceeds station {station.name} "
                f"limit of {complexity_limit:.1f}",
            )

        queued = station_workload(current_orders)
        workload_limit = max_workload(station.station_type)
        if queued + order.estimated_completion_minutes > workload_limit:
            return Decision.reject(
                RejectKind.STATION_INCOMPATIBLE,
                f"Station {station.name} has {queued:.0f} minutes queued; adding "
                f"{order.estimated_completion_minutes:.0f} exceeds {workload_limit:.0f}",
            )

        return Decision.accept()

    def can_assign(
        self,
        order: Order,
        station: Station,
        current_orders: Sequence[Order],
    ) -> bool:
        """Check if an order can be assigned to a station."""
        return self.check_assignment(order, station, current_orders).accepted

    def score_station(
        self,
        order: Order,
        station: Station,
        current_orders: Sequence[Order],
    ) -> float:
        """Score a station for an order (higher is better)."""
        score = BASE_SCORE

        # Penalize queued work relative to what the station type can absorb
        workload_share = station_workload(current_orders) / max_workload(station.station_type)
        score -= workload_share * WORKLOAD_PENALTY

        score += (1.0 - station.workload_ratio) * FREE_CAPACITY_BONUS

        # Specialization is judged on the first item only
        if order.items and is_specialized(
            station.station_type, order.items[0].recipe.category
        ):
            score += SPECIALIZATION_BONUS

        complexity_limit = max_complexity(station.station_type)
        if order_complexity(order) > complexity_limit * COMPLEXITY_MISMATCH_RATIO:
            score -= COMPLEXITY_MISMATCH_PENALTY

        return score

    def rank_stations(
        self,
        order: Order,
        stations: Sequence[Station],
        orders_by_station: Mapping[UUID, Sequence[Order]],
    ) -> list[tuple[Station, float]]:
        """
        Score every eligible station for an order.

        Args:
            order: Order to place
            stations: Candidate stations, in caller order
            orders_by_station: Current orders keyed by station id; missing
                stations are treated as empty

        Returns:
            (station, score) pairs, best first. Equal scores keep input order.
        """
        ranked = []
        for station in stations:
            current_orders = orders_by_station.get(station.id, ())
            if not self.can_assign(order, station, current_orders):
                continue
            ranked.append((station, self.score_station(order, station, current_orders)))

        # sorted() is stable, so ties stay in input order
        return sorted(ranked, key=lambda pair: pair[1], reverse=True)

    def find_optimal_station(
        self,
        order: Order,
        stations: Sequence[Station],
        orders_by_station: Mapping[UUID, Sequence[Order]],
    ) -> Station | None:
        """
        Find the best station for an order.

        Args:
            order: Order to place
            stations: Candidate stations, in caller order
            orders_by_station: Current orders keyed by station id

        Returns:
            The highest-scoring eligible station, the first one in input order
            on ties, or None when no station is eligible
        """
        ranked = self.rank_stations(order, stations, orders_by_station)

        if not ranked:
            self.logger.log_selection(
                order_id=str(order.id),
                station_id=None,
                score=None,
                candidates=0,
            )
            return None

        best_station, best_score = ranked[0]
        self.logger.log_selection(
            order_id=str(order.id),
            station_id=str(best_station.id),
            score=best_score,
            candidates=len(ranked),
        )
        return best_station
