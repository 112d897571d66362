#!/usr/bin/env python3
"""
Create the ship table and fill it with deterministic random ships.

Usage:
    DATABASE_URL=postgresql+psycopg://... python scripts/seed_ships.py
"""

from __future__ import annotations

import sys

from ship_registry.infra.db.schema import create_schema
from ship_registry.infra.db.seed import NUM_SHIPS, RANDOM_SEED, seed_ships
from ship_registry.infra.db.session import get_engine, get_session


def main() -> None:
    print(f"🌱 Seeding database with {NUM_SHIPS} ships (seed={RANDOM_SEED})...")

    create_schema(get_engine())

    with get_session() as session:
        ships = seed_ships(session)

        print(f"✅ Successfully seeded {len(ships)} ships!")

        print("\n📊 Sample ships:")
        for i, ship in enumerate(ships[:5], 1):
            print(
                f"   {i}. {ship.name} from {ship.planet} ({ship.ship_type}, "
                f"{ship.prod_date.year}) speed={ship.speed} rating={ship.rating}"
            )

        if len(ships) > 5:
            print(f"   ... and {len(ships) - 5} more")


if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        print(f"❌ Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
