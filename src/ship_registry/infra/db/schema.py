from __future__ import annotations

from sqlalchemy import Engine

from ship_registry.infra.db.models import Base


def create_schema(engine: Engine) -> None:
    """Create the ship table if it does not exist yet."""
    Base.metadata.create_all(bind=engine)
