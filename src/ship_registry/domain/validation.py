"""Field rules for ship payloads and identifiers.

Checks are pure: they never touch storage and never coerce input.
Every violated rule is collected and reported in a single BadRequestError.
"""

from __future__ import annotations

from ship_registry.domain.errors import BadRequestError
from ship_registry.domain.ship import ShipPayload, from_epoch_millis

MAX_TEXT_LENGTH = 50
MIN_PRODUCTION_YEAR = 2800
MAX_PRODUCTION_YEAR = 3019
MIN_SPEED = 0.01
MAX_SPEED = 0.99
MIN_CREW_SIZE = 1
MAX_CREW_SIZE = 9999

_REQUIRED_ON_CREATE = ("name", "planet", "ship_type", "prod_date", "speed", "crew_size")


def _error(field: str, message: str, code: str) -> dict[str, str]:
    return {"field": field, "message": message, "code": code}


def _mutation_errors(payload: ShipPayload) -> list[dict[str, str]]:
    errors = []

    for field in ("name", "planet"):
        if payload.has(field):
            value = getattr(payload, field)
            if not value or len(value) > MAX_TEXT_LENGTH:
                errors.append(
                    _error(
                        field,
                        f"Must be between 1 and {MAX_TEXT_LENGTH} characters",
                        "INVALID_LENGTH",
                    )
                )

    # Guard on presence: an absent prod_date never reaches the year check
    if payload.has("prod_date"):
        try:
            year = from_epoch_millis(payload.prod_date).year
        except (OverflowError, ValueError):
            year = None
        if year is None or not MIN_PRODUCTION_YEAR <= year <= MAX_PRODUCTION_YEAR:
            errors.append(
                _error(
                    "prod_date",
                    f"Year must be between {MIN_PRODUCTION_YEAR} and {MAX_PRODUCTION_YEAR}",
                    "OUT_OF_RANGE",
                )
            )

    if payload.has("speed") and not MIN_SPEED <= payload.speed <= MAX_SPEED:
        errors.append(
            _error("speed", f"Must be between {MIN_SPEED} and {MAX_SPEED}", "OUT_OF_RANGE")
        )

    if payload.has("crew_size") and not MIN_CREW_SIZE <= payload.crew_size <= MAX_CREW_SIZE:
        errors.append(
            _error(
                "crew_size",
                f"Must be between {MIN_CREW_SIZE} and {MAX_CREW_SIZE}",
                "OUT_OF_RANGE",
            )
        )

    return errors


def validate_mutation(payload: ShipPayload) -> None:
    """
    Validate the fields present in a create or update payload.

    Raises:
        BadRequestError: If any present field violates its constraint
    """
    errors = _mutation_errors(payload)
    if errors:
        raise BadRequestError(errors=errors)


def validate_create(payload: ShipPayload) -> None:
    """
    Validate a create payload: mandatory fields first, then field ranges.

    Raises:
        BadRequestError: If a mandatory field is missing or any field is invalid
    """
    errors = [
        _error(field, "Field is required", "REQUIRED")
        for field in _REQUIRED_ON_CREATE
        if not payload.has(field)
    ]

    if payload.has("prod_date") and payload.prod_date < 0:
        errors.append(_error("prod_date", "Must be a non-negative timestamp", "OUT_OF_RANGE"))

    errors.extend(_mutation_errors(payload))

    if errors:
        raise BadRequestError(errors=errors)


def validate_ship_id(ship_id: int) -> None:
    """
    Validate the shape of a ship identifier.

    Existence is checked separately against the repository.

    Raises:
        BadRequestError: If ship_id is not a positive integer
    """
    if isinstance(ship_id, bool) or not isinstance(ship_id, int) or ship_id <= 0:
        raise BadRequestError(
            errors=[_error("id", "Must be a positive integer", "INVALID_ID")]
        )
