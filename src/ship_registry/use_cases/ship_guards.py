from __future__ import annotations

from ship_registry.domain.errors import NotFoundError
from ship_registry.domain.validation import validate_ship_id
from ship_registry.ports.ship_repository import ShipRepository


def require_existing_ship(repository: ShipRepository, ship_id: int) -> None:
    """
    Validate that ship_id is positive and references a stored ship.

    Raises:
        BadRequestError: If ship_id is not a positive integer
        NotFoundError: If no ship has this identifier
    """
    validate_ship_id(ship_id)

    if not repository.exists_by_id(ship_id):
        raise NotFoundError(resource="Ship", identifier=str(ship_id))
