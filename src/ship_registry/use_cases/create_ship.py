from __future__ import annotations

import logging
from dataclasses import dataclass

from ship_registry.domain.errors import NotFoundError
from ship_registry.domain.rating import compute_rating
from ship_registry.domain.ship import Ship, ShipDraft, ShipPayload, from_epoch_millis
from ship_registry.domain.validation import validate_create
from ship_registry.ports.ship_repository import ShipRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CreateShipRequest:
    payload: ShipPayload


@dataclass(frozen=True, slots=True)
class CreateShipResponse:
    ship: Ship


class CreateShip:
    """
    Create a ship from a validated payload.

    - is_used defaults to False when not provided
    - rating is always computed, never taken from the client
    - the stored ship is re-read so the response reflects persisted values
    """

    def __init__(self, ship_repository: ShipRepository) -> None:
        self._repository = ship_repository

    def execute(self, request: CreateShipRequest) -> CreateShipResponse:
        """
        Execute ship creation.

        Raises:
            BadRequestError: If a mandatory field is missing or a field is out of range
            NotFoundError: If the stored ship cannot be read back
        """
        payload = request.payload
        validate_create(payload)

        is_used = payload.is_used if payload.has("is_used") else False
        prod_date = from_epoch_millis(payload.prod_date)

        draft = ShipDraft(
            name=payload.name,
            planet=payload.planet,
            ship_type=payload.ship_type,
            prod_date=prod_date,
            is_used=is_used,
            speed=payload.speed,
            crew_size=payload.crew_size,
            rating=compute_rating(payload.speed, is_used, prod_date.year),
        )
        ship_id = self._repository.insert(draft)

        ship = self._repository.get_by_id(ship_id)
        if ship is None:
            raise NotFoundError(resource="Ship", identifier=str(ship_id))

        logger.info("Ship created", extra={"ship_id": ship_id, "rating": ship.rating})
        return CreateShipResponse(ship=ship)
