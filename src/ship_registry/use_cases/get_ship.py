"""Get ship by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from ship_registry.domain.errors import NotFoundError
from ship_registry.domain.ship import Ship
from ship_registry.ports.ship_repository import ShipRepository
from ship_registry.use_cases.ship_guards import require_existing_ship


@dataclass(frozen=True, slots=True)
class GetShipRequest:
    ship_id: int


@dataclass(frozen=True, slots=True)
class GetShipResponse:
    ship: Ship


class GetShip:
    """
    Use case for retrieving a single ship by ID.

    Responsibilities:
    - Validate ship_id (positive integer, existing ship)
    - Delegate to repository for data access
    - Raise NotFoundError if ship doesn't exist
    """

    def __init__(self, ship_repository: ShipRepository) -> None:
        self._repository = ship_repository

    def execute(self, request: GetShipRequest) -> GetShipResponse:
        """
        Execute the get ship by ID use case.

        Raises:
            BadRequestError: If ship_id is not a positive integer
            NotFoundError: If ship with given ID doesn't exist
        """
        require_existing_ship(self._repository, request.ship_id)

        ship = self._repository.get_by_id(request.ship_id)

        if ship is None:
            raise NotFoundError(resource="Ship", identifier=str(request.ship_id))

        return GetShipResponse(ship=ship)
