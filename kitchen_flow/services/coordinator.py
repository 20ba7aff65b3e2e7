"""Kitchen coordinator - resolves identifiers and routes requests to the validator."""

from uuid import UUID

from kitchen_flow.models.decision import Decision, RejectKind
from kitchen_flow.models.order import Order, OrderStatus
from kitchen_flow.models.staff import StaffMember
from kitchen_flow.models.station import Station
from kitchen_flow.services.workflow_validator import WorkflowValidator
from kitchen_flow.state.repositories import OrderLookup, StationLookup, UserLookup
from kitchen_flow.utils.logging import get_logger
from kitchen_flow.utils.tracing import EvaluationTracer

logger = get_logger(__name__)


class KitchenCoordinator:
    """
    Use-case layer entry point working with identifiers instead of snapshots.

    Responsibilities:
    - Fetch fresh snapshots from the lookups for every request
    - Turn unknown identifiers into rejections
    - Delegate the decision to the workflow validator and trace it

    The coordinator decides on a snapshot only. Storage must serialize
    conflicting writes, e.g. two assignments racing for the same station.
    """

    def __init__(
        self,
        orders: OrderLookup,
        stations: StationLookup,
        users: UserLookup,
        validator: WorkflowValidator | None = None,
        tracer: EvaluationTracer | None = None,
    ):
        self.orders = orders
        self.stations = stations
        self.users = users
        self.validator = validator or WorkflowValidator()
        self.tracer = tracer or EvaluationTracer()

    def request_status_change(
        self,
        order_id: UUID,
        target: OrderStatus,
        user_id: UUID,
        max_concurrent: int | None = None,
    ) -> Decision:
        """
        Evaluate a status change for stored order and user ids.

        Args:
            order_id: Order to change
            target: Requested status
            user_id: Staff member asking for the change
            max_concurrent: Cap on active orders; defaults to the configured value

        Returns:
            The validator's decision; unknown orders are guard violations and
            unknown users are unauthorized. Changes that bring an order into
            the active set are also checked against kitchen capacity.
        """
        with self.tracer.trace_operation(
            "status_change", order_id=str(order_id), target=target.value
        ) as trace:
            order = self.orders.get_order(order_id)
            user = self.users.get_user(user_id)

            if order is None:
                decision = self._order_not_found(order_id)
            elif user is None:
                decision = Decision.reject(
                    RejectKind.UNAUTHORIZED, f"User {user_id} not found"
                )
            else:
                decision = self.validator.evaluate_order_intake(
                    order,
                    target,
                    user,
                    list(self.orders.list_orders()),
                    list(self.users.list_users()),
                    max_concurrent,
                )

            trace["accepted"] = decision.accepted
        return decision

    def request_assignment(self, order_id: UUID, station_id: UUID) -> Decision:
        """Evaluate assigning a stored order to a stored station."""
        with self.tracer.trace_operation(
            "assignment", order_id=str(order_id), station_id=str(station_id)
        ) as trace:
            order = self.orders.get_order(order_id)
            station = self.stations.get_station(station_id)

            if order is None:
                decision = self._order_not_found(order_id)
            elif station is None:
                decision = self._station_not_found(station_id)
            else:
                station_orders = self._other_orders(order, station)
                decision = self.validator.evaluate_assignment(order, station, station_orders)

            trace["accepted"] = decision.accepted
        return decision

    def suggest_station(self, order_id: UUID) -> Station | None:
        """Find the best station for a stored order across all stations."""
        with self.tracer.trace_operation("suggest_station", order_id=str(order_id)) as trace:
            order = self.orders.get_order(order_id)
            if order is None:
                logger.info("order_not_found", order_id=str(order_id))
                trace["station_id"] = None
                return None

            stations = list(self.stations.list_stations())
            orders_by_station = {
                station.id: self._other_orders(order, station) for station in stations
            }
            best = self.validator.find_best_station(order, stations, orders_by_station)

            trace["station_id"] = str(best.id) if best else None
        return best

    def request_staff_assignment(
        self,
        user_id: UUID,
        station_id: UUID,
        order_id: UUID,
    ) -> Decision:
        """Evaluate whether a stored staff member may work an order at a station."""
        with self.tracer.trace_operation(
            "staff_assignment",
            user_id=str(user_id),
            station_id=str(station_id),
            order_id=str(order_id),
        ) as trace:
            user = self.users.get_user(user_id)
            station = self.stations.get_station(station_id)
            order = self.orders.get_order(order_id)

            if user is None:
                decision = Decision.reject(
                    RejectKind.STAFF_UNQUALIFIED, f"User {user_id} not found"
                )
            elif station is None:
                decision = self._station_not_found(station_id)
            elif order is None:
                decision = self._order_not_found(order_id)
            else:
                decision = self.validator.evaluate_staff_assignment(user, station, order)

            trace["accepted"] = decision.accepted
        return decision

    def qualified_staff(self, station_id: UUID, order_id: UUID) -> list[StaffMember]:
        """Roster members of a station who may work the given order there."""
        with self.tracer.trace_operation(
            "qualified_staff", station_id=str(station_id), order_id=str(order_id)
        ) as trace:
            station = self.stations.get_station(station_id)
            order = self.orders.get_order(order_id)
            if station is None or order is None:
                qualified = []
            else:
                qualified = [
                    member
                    for member in self.stations.get_station_roster(station_id)
                    if self.validator.qualification.can_staff_handle(member, station, order)
                ]

            trace["qualified"] = len(qualified)
        return qualified

    def request_capacity_check(self, max_concurrent: int | None = None) -> Decision:
        """Evaluate kitchen capacity over every stored order and staff member."""
        with self.tracer.trace_operation("capacity") as trace:
            decision = self.validator.evaluate_capacity(
                list(self.orders.list_orders()),
                list(self.users.list_users()),
                max_concurrent,
            )
            trace["accepted"] = decision.accepted
        return decision

    def _other_orders(self, order: Order, station: Station) -> list[Order]:
        """Station orders, leaving out the order being placed."""
        return [
            current
            for current in self.stations.get_station_orders(station.id)
            if current.id != order.id
        ]

    def _order_not_found(self, order_id: UUID) -> Decision:
        return Decision.reject(RejectKind.GUARD_VIOLATION, f"Order {order_id} not found")

    def _station_not_found(self, station_id: UUID) -> Decision:
        return Decision.reject(
            RejectKind.GUARD_VIOLATION, f"Station {station_id} not found"
        )
