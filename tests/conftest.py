"""Shared fixtures: ship factories and an in-memory SQLite session."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable, Iterator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from ship_registry.domain.ship import Ship, ShipType, to_epoch_millis
from ship_registry.infra.db.schema import create_schema


@pytest.fixture()
def year_millis() -> Callable[[int], int]:
    """Epoch milliseconds for January 1st of a given year (UTC)."""

    def _millis(year: int) -> int:
        return to_epoch_millis(datetime(year, 1, 1, tzinfo=timezone.utc))

    return _millis


@pytest.fixture()
def make_ship() -> Callable[..., Ship]:
    def _make(**overrides: Any) -> Ship:
        values: dict[str, Any] = {
            "id": 1,
            "name": "Falcon",
            "planet": "Earth",
            "ship_type": ShipType.TRANSPORT,
            "prod_date": datetime(2900, 1, 1, tzinfo=timezone.utc),
            "is_used": False,
            "speed": 0.5,
            "crew_size": 10,
            "rating": 0.33,
        }
        values.update(overrides)
        return Ship(**values)

    return _make


@pytest.fixture()
def fleet(make_ship: Callable[..., Ship]) -> list[Ship]:
    return [
        make_ship(id=1, name="Falcon", planet="Earth", ship_type=ShipType.TRANSPORT,
                  prod_date=datetime(2900, 1, 1, tzinfo=timezone.utc), is_used=False,
                  speed=0.5, crew_size=10, rating=0.33),
        make_ship(id=2, name="Millennium Falcon", planet="Tatooine", ship_type=ShipType.MERCHANT,
                  prod_date=datetime(2990, 6, 1, tzinfo=timezone.utc), is_used=True,
                  speed=0.9, crew_size=4, rating=1.2),
        make_ship(id=3, name="Orion", planet="Mars", ship_type=ShipType.MILITARY,
                  prod_date=datetime(3010, 3, 15, tzinfo=timezone.utc), is_used=False,
                  speed=0.25, crew_size=500, rating=2.0),
        make_ship(id=4, name="Nebula", planet="earth-2", ship_type=ShipType.MILITARY,
                  prod_date=datetime(2850, 12, 31, tzinfo=timezone.utc), is_used=True,
                  speed=0.75, crew_size=2500, rating=0.18),
        make_ship(id=5, name="Comet", planet="Venus", ship_type=ShipType.TRANSPORT,
                  prod_date=datetime(3019, 1, 1, tzinfo=timezone.utc), is_used=False,
                  speed=0.1, crew_size=1, rating=8.0),
    ]


@pytest.fixture()
def db_session() -> Iterator[Session]:
    """Fresh in-memory SQLite database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_schema(engine)
    session = sessionmaker(bind=engine, expire_on_commit=False)()

    try:
        yield session
    finally:
        session.close()
        engine.dispose()
