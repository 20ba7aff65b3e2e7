"""Lookup capabilities the engine expects from the surrounding storage layer."""

from collections.abc import Iterable, Sequence
from typing import Protocol, runtime_checkable
from uuid import UUID

from kitchen_flow.models.order import Order
from kitchen_flow.models.staff import StaffMember
from kitchen_flow.models.station import Station
from kitchen_flow.utils.logging import get_logger

logger = get_logger(__name__)


@runtime_checkable
class OrderLookup(Protocol):
    """Resolve an order id to its current snapshot."""

    def get_order(self, order_id: UUID) -> Order | None: ...

    def list_orders(self) -> Sequence[Order]: ...


@runtime_checkable
class StationLookup(Protocol):
    """Resolve stations, their assigned orders and their staff rosters."""

    def get_station(self, station_id: UUID) -> Station | None: ...

    def list_stations(self) -> Sequence[Station]: ...

    def get_station_orders(self, station_id: UUID) -> Sequence[Order]: ...

    def get_station_roster(self, station_id: UUID) -> Sequence[StaffMember]: ...


@runtime_checkable
class UserLookup(Protocol):
    """Resolve a user id to a staff snapshot."""

    def get_user(self, user_id: UUID) -> StaffMember | None: ...

    def list_users(self) -> Sequence[StaffMember]: ...


class InMemoryKitchenState:
    """Dictionary-backed implementation of all three lookups.

    Orders belong to a station through `Order.assigned_station_id`; rosters
    are kept separately since staff are not owned by stations. Callers are
    responsible for serializing writes.
    """

    def __init__(
        self,
        orders: Iterable[Order] = (),
        stations: Iterable[Station] = (),
        users: Iterable[StaffMember] = (),
    ) -> None:
        self.orders: dict[UUID, Order] = {order.id: order for order in orders}
        self.stations: dict[UUID, Station] = {station.id: station for station in stations}
        self.users: dict[UUID, StaffMember] = {user.id: user for user in users}
        self.rosters: dict[UUID, list[UUID]] = {}

    def put_order(self, order: Order) -> None:
        """Insert or replace an order snapshot."""
        self.orders[order.id] = order
        logger.debug("order_stored", order_id=str(order.id), status=order.status.value)

    def put_station(self, station: Station) -> None:
        self.stations[station.id] = station

    def put_user(self, user: StaffMember) -> None:
        self.users[user.id] = user

    def add_to_roster(self, station_id: UUID, user_id: UUID) -> None:
        """Put a staff member on a station's roster."""
        roster = self.rosters.setdefault(station_id, [])
        if user_id not in roster:
            roster.append(user_id)

    def get_order(self, order_id: UUID) -> Order | None:
        return self.orders.get(order_id)

    def list_orders(self) -> list[Order]:
        return list(self.orders.values())

    def get_station(self, station_id: UUID) -> Station | None:
        return self.stations.get(station_id)

    def list_stations(self) -> list[Station]:
        return list(self.stations.values())

    def get_station_orders(self, station_id: UUID) -> list[Order]:
        return [
            order
            for order in self.orders.values()
            if order.assigned_station_id == station_id
        ]

    def get_station_roster(self, station_id: UUID) -> list[StaffMember]:
        return [
            self.users[user_id]
            for user_id in self.rosters.get(station_id, [])
            if user_id in self.users
        ]

    def get_user(self, user_id: UUID) -> StaffMember | None:
        return self.users.get(user_id)

    def list_users(self) -> list[StaffMember]:
        return list(self.users.values())
