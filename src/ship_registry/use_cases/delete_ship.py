from __future__ import annotations

import logging
from dataclasses import dataclass

from ship_registry.ports.ship_repository import ShipRepository
from ship_registry.use_cases.ship_guards import require_existing_ship

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DeleteShipRequest:
    ship_id: int


class DeleteShip:
    """Hard-delete a ship after checking that it exists."""

    def __init__(self, ship_repository: ShipRepository) -> None:
        self._repository = ship_repository

    def execute(self, request: DeleteShipRequest) -> None:
        require_existing_ship(self._repository, request.ship_id)

        self._repository.delete_by_id(request.ship_id)

        logger.info("Ship deleted", extra={"ship_id": request.ship_id})
