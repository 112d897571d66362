from __future__ import annotations

from dataclasses import dataclass, field

from ship_registry.domain.ship import ShipFilters
from ship_registry.domain.ship_query import build_predicates
from ship_registry.ports.ship_repository import ShipRepository


@dataclass(frozen=True, slots=True)
class CountShipsRequest:
    filters: ShipFilters = field(default_factory=ShipFilters)


class CountShips:
    """Number of ships matching the filters, ignoring paging and order."""

    def __init__(self, ship_repository: ShipRepository) -> None:
        self._repository = ship_repository

    def execute(self, request: CountShipsRequest) -> int:
        return self._repository.count(build_predicates(request.filters))
