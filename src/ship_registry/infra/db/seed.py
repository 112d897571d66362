"""
Seed the ship table with deterministic random data.

Features:
- Deterministic: fixed seed -> same dataset every run
- Idempotent: safe to run multiple times (clears before seeding)
- Ratings come from the same calculator the API uses
"""

from __future__ import annotations

import logging
import random
from datetime import datetime, timezone

from sqlalchemy import delete
from sqlalchemy.orm import Session

from ship_registry.domain.rating import compute_rating
from ship_registry.domain.ship import ShipType
from ship_registry.domain.validation import (
    MAX_CREW_SIZE,
    MAX_PRODUCTION_YEAR,
    MIN_CREW_SIZE,
    MIN_PRODUCTION_YEAR,
)
from ship_registry.infra.db.models import ShipRow

logger = logging.getLogger(__name__)

RANDOM_SEED = 42
NUM_SHIPS = 40

NAME_PREFIXES = ["Orion", "Eagle", "Falcon", "Nebula", "Comet", "Valkyrie", "Phoenix", "Aurora"]
NAME_SUFFIXES = ["I", "II", "III", "Prime", "Nova", "Star", "Wing", "Drift"]
PLANETS = ["Earth", "Mars", "Venus", "Jupiter", "Saturn", "Neptune", "Pluto", "Mercury"]


def generate_ship(rng: random.Random) -> ShipRow:
    """Generate a single random ship with a consistent rating."""
    name = f"{rng.choice(NAME_PREFIXES)} {rng.choice(NAME_SUFFIXES)}"
    year = rng.randint(MIN_PRODUCTION_YEAR, MAX_PRODUCTION_YEAR)
    prod_date = datetime(year, rng.randint(1, 12), rng.randint(1, 28), tzinfo=timezone.utc)
    is_used = rng.random() < 0.5
    speed = round(rng.uniform(0.01, 0.99), 2)

    return ShipRow(
        name=name,
        planet=rng.choice(PLANETS),
        ship_type=rng.choice(list(ShipType)).value,
        prod_date=prod_date,
        is_used=is_used,
        speed=speed,
        crew_size=rng.randint(MIN_CREW_SIZE, MAX_CREW_SIZE),
        rating=compute_rating(speed, is_used, year),
    )


def seed_ships(session: Session, num_ships: int = NUM_SHIPS, seed: int = RANDOM_SEED) -> list[ShipRow]:
    """
    Replace the content of the ship table with `num_ships` generated ships.

    Args:
        session: Open session; the caller owns commit/rollback
        num_ships: Number of ships to generate
        seed: Random seed for deterministic results

    Returns:
        The inserted rows (identifiers populated)
    """
    rng = random.Random(seed)

    deleted_count = session.execute(delete(ShipRow)).rowcount
    logger.info("Cleared existing ships", extra={"deleted": deleted_count})

    ships = [generate_ship(rng) for _ in range(num_ships)]
    session.add_all(ships)
    session.flush()

    logger.info("Seeded ships", extra={"count": len(ships), "seed": seed})
    return ships
