"""Test suite for CountShips use case."""

from __future__ import annotations

from unittest.mock import Mock

from ship_registry.adapters.in_memory_ship_repository import InMemoryShipRepository
from ship_registry.domain.ship import Ship, ShipFilters, ShipOrder, ShipType
from ship_registry.domain.ship_query import Operator, Predicate
from ship_registry.ports.ship_repository import ShipRepository
from ship_registry.use_cases.count_ships import CountShips, CountShipsRequest


def test_counts_all_ships_without_filters(fleet: list[Ship]) -> None:
    use_case = CountShips(ship_repository=InMemoryShipRepository(fleet))

    assert use_case.execute(CountShipsRequest()) == 5


def test_counts_matching_ships(fleet: list[Ship]) -> None:
    use_case = CountShips(ship_repository=InMemoryShipRepository(fleet))

    assert use_case.execute(CountShipsRequest(filters=ShipFilters(ship_type=ShipType.MILITARY))) == 2


def test_order_does_not_affect_count() -> None:
    repository = Mock(spec=ShipRepository)
    repository.count.return_value = 7

    result = CountShips(ship_repository=repository).execute(
        CountShipsRequest(filters=ShipFilters(is_used=True, order=ShipOrder.SPEED))
    )

    assert result == 7
    repository.count.assert_called_once_with([Predicate("is_used", Operator.EQ, True)])


def test_empty_registry_counts_zero() -> None:
    use_case = CountShips(ship_repository=InMemoryShipRepository())

    assert use_case.execute(CountShipsRequest()) == 0
