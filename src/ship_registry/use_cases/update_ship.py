from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any

from ship_registry.domain.errors import NotFoundError
from ship_registry.domain.rating import compute_rating
from ship_registry.domain.ship import Ship, ShipPayload, from_epoch_millis
from ship_registry.domain.validation import validate_mutation
from ship_registry.ports.ship_repository import ShipRepository
from ship_registry.use_cases.ship_guards import require_existing_ship

logger = logging.getLogger(__name__)

# Fields the rating is derived from
RATING_INPUTS = ("prod_date", "is_used", "speed")


@dataclass(frozen=True, slots=True)
class UpdateShipRequest:
    ship_id: int
    payload: ShipPayload


@dataclass(frozen=True, slots=True)
class UpdateShipResponse:
    ship: Ship


class UpdateShip:
    """
    Partial update of a ship.

    Only fields present in the payload are written. When a rating input
    (prod_date, is_used, speed) is present, the stored ship is loaded with a
    row lock, the present inputs are merged onto a copy and the rating is
    recomputed from the merged values. All changes, rating included, go out
    in a single update_fields() call.
    """

    def __init__(self, ship_repository: ShipRepository) -> None:
        self._repository = ship_repository

    def execute(self, request: UpdateShipRequest) -> UpdateShipResponse:
        """
        Execute the partial update.

        Raises:
            BadRequestError: If ship_id or a present field is invalid
            NotFoundError: If the ship doesn't exist, or disappeared before re-read
        """
        require_existing_ship(self._repository, request.ship_id)
        validate_mutation(request.payload)

        changes: dict[str, Any] = request.payload.provided()
        if "prod_date" in changes:
            changes["prod_date"] = from_epoch_millis(changes["prod_date"])

        rating = self._recomputed_rating(request.ship_id, changes)
        if rating is not None:
            changes["rating"] = rating

        self._repository.update_fields(request.ship_id, changes)

        ship = self._repository.get_by_id(request.ship_id)
        if ship is None:
            raise NotFoundError(resource="Ship", identifier=str(request.ship_id))

        logger.info(
            "Ship updated",
            extra={"ship_id": request.ship_id, "fields": sorted(changes)},
        )
        return UpdateShipResponse(ship=ship)

    def _recomputed_rating(self, ship_id: int, changes: dict[str, Any]) -> float | None:
        """Return the rating for the merged ship, or None when no rating input changed."""
        rating_changes = {field: changes[field] for field in RATING_INPUTS if field in changes}
        if not rating_changes:
            return None

        current = self._repository.get_by_id(ship_id, for_update=True)
        if current is None:
            return None

        merged = replace(current, **rating_changes)
        return compute_rating(merged.speed, merged.is_used, merged.production_year)
