"""
Dependency injection for FastAPI routes.

Key principle: Database sessions are per-request, not cached.
Every use case gets a fresh repository bound to the request's session,
so all repository calls of one request share a single transaction.
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from ship_registry.adapters.postgres_ship_repository import PostgresShipRepository
from ship_registry.infra.db.session import get_session
from ship_registry.ports.ship_repository import ShipRepository
from ship_registry.use_cases.count_ships import CountShips
from ship_registry.use_cases.create_ship import CreateShip
from ship_registry.use_cases.delete_ship import DeleteShip
from ship_registry.use_cases.get_ship import GetShip
from ship_registry.use_cases.list_ships import ListShips
from ship_registry.use_cases.update_ship import UpdateShip


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    The underlying get_session() is a context manager that handles:
    - Session creation
    - Auto-commit on success
    - Auto-rollback on exception
    - Session cleanup

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session() as session:
        yield session


def get_ship_repository(db: Session = Depends(get_db)) -> ShipRepository:
    return PostgresShipRepository(session=db)


def get_list_ships_use_case(
    repository: ShipRepository = Depends(get_ship_repository),
) -> ListShips:
    return ListShips(ship_repository=repository)


def get_count_ships_use_case(
    repository: ShipRepository = Depends(get_ship_repository),
) -> CountShips:
    return CountShips(ship_repository=repository)


def get_create_ship_use_case(
    repository: ShipRepository = Depends(get_ship_repository),
) -> CreateShip:
    return CreateShip(ship_repository=repository)


def get_get_ship_use_case(
    repository: ShipRepository = Depends(get_ship_repository),
) -> GetShip:
    return GetShip(ship_repository=repository)


def get_update_ship_use_case(
    repository: ShipRepository = Depends(get_ship_repository),
) -> UpdateShip:
    return UpdateShip(ship_repository=repository)


def get_delete_ship_use_case(
    repository: ShipRepository = Depends(get_ship_repository),
) -> DeleteShip:
    return DeleteShip(ship_repository=repository)
