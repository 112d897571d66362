from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

CURRENT_YEAR = 3019
RATING_FACTOR = Decimal("80")
USED_COEFFICIENT = Decimal("0.5")
NEW_COEFFICIENT = Decimal("1")


def compute_rating(speed: float, is_used: bool, production_year: int) -> float:
    """
    Derive a ship rating from its speed, usage and production year.

        rating = (80 * speed * k) / (CURRENT_YEAR - production_year + 1)

    where k is 0.5 for used ships and 1 otherwise.

    Rounding policy:
    - Computed with Decimal from the decimal representation of speed
    - Result rounded to 2 decimal places using ROUND_HALF_UP

    Inputs are expected to be validated: production_year <= CURRENT_YEAR
    keeps the denominator >= 1.
    """
    k = USED_COEFFICIENT if is_used else NEW_COEFFICIENT
    age = Decimal(CURRENT_YEAR - production_year + 1)

    rating = (RATING_FACTOR * Decimal(str(speed)) * k) / age

    return float(rating.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))
