"""PostgreSQL implementation of ShipRepository."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import timezone
from enum import Enum
from typing import TYPE_CHECKING, Any

from sqlalchemy import delete, func, select, update
from sqlalchemy.orm import InstrumentedAttribute, Session

from ship_registry.domain.ship import Paging, Ship, ShipDraft, ShipType
from ship_registry.domain.ship_query import Operator, Predicate, Sort
from ship_registry.infra.db.models.ship import ShipRow
from ship_registry.ports.ship_repository import ShipRepository

if TYPE_CHECKING:
    from sqlalchemy.sql import ColumnElement

# Domain field name -> mapped column
_COLUMNS: dict[str, InstrumentedAttribute[Any]] = {
    "id": ShipRow.id,
    "name": ShipRow.name,
    "planet": ShipRow.planet,
    "ship_type": ShipRow.ship_type,
    "prod_date": ShipRow.prod_date,
    "is_used": ShipRow.is_used,
    "speed": ShipRow.speed,
    "crew_size": ShipRow.crew_size,
    "rating": ShipRow.rating,
}


class PostgresShipRepository(ShipRepository):
    """
    PostgreSQL implementation of ShipRepository.

    - Uses SQLAlchemy ORM for database access
    - Translates domain predicates into SQL WHERE clauses
    - Partial updates are a single UPDATE statement keyed by id
    - Converts ShipRow (infrastructure) to Ship (domain)

    Also runs on SQLite (tests); row locks are silently skipped there.
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def find(
        self,
        predicates: Sequence[Predicate],
        sort: Sort | None,
        paging: Paging,
    ) -> list[Ship]:
        # Trust that UseCase has validated inputs (contract programming)
        query = select(ShipRow)
        for clause in self._where_clauses(predicates):
            query = query.where(clause)

        if sort is not None:
            column = _COLUMNS[sort.field]
            query = query.order_by(column.asc() if sort.ascending else column.desc())
        # Deterministic order for paging: ties and unsorted results by id
        query = query.order_by(ShipRow.id.asc())

        query = query.offset(paging.offset).limit(paging.limit)

        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    def count(self, predicates: Sequence[Predicate]) -> int:
        query = select(func.count()).select_from(ShipRow)
        for clause in self._where_clauses(predicates):
            query = query.where(clause)

        return self._session.execute(query).scalar() or 0

    def insert(self, draft: ShipDraft) -> int:
        row = ShipRow(
            name=draft.name,
            planet=draft.planet,
            ship_type=draft.ship_type.value,
            prod_date=draft.prod_date,
            is_used=draft.is_used,
            speed=draft.speed,
            crew_size=draft.crew_size,
            rating=draft.rating,
        )
        self._session.add(row)
        self._session.flush()  # Assigns the identifier
        return row.id

    def get_by_id(self, ship_id: int, for_update: bool = False) -> Ship | None:
        query = (
            select(ShipRow)
            .where(ShipRow.id == ship_id)
            .execution_options(populate_existing=True)
        )
        if for_update:
            query = query.with_for_update()

        row = self._session.execute(query).scalar_one_or_none()
        return self._to_domain(row) if row else None

    def exists_by_id(self, ship_id: int) -> bool:
        query = select(ShipRow.id).where(ShipRow.id == ship_id)
        return self._session.execute(query).scalar_one_or_none() is not None

    def update_fields(self, ship_id: int, changes: Mapping[str, Any]) -> None:
        if not changes:
            return

        values = {
            field: value.value if isinstance(value, Enum) else value
            for field, value in changes.items()
        }
        statement = (
            update(ShipRow)
            .where(ShipRow.id == ship_id)
            .values(**values)
            .execution_options(synchronize_session="fetch")
        )
        self._session.execute(statement)

    def delete_by_id(self, ship_id: int) -> None:
        statement = (
            delete(ShipRow)
            .where(ShipRow.id == ship_id)
            .execution_options(synchronize_session="fetch")
        )
        self._session.execute(statement)

    def _where_clauses(self, predicates: Sequence[Predicate]) -> list[ColumnElement[bool]]:
        """
        Translate domain predicates into SQLAlchemy boolean expressions.

        Args:
            predicates: Conjunctive predicates to apply

        Returns:
            One WHERE clause per predicate, in the same order
        """
        clauses = []
        for predicate in predicates:
            column = _COLUMNS[predicate.field]

            if predicate.operator is Operator.CONTAINS_IGNORE_CASE:
                clause = func.upper(column).contains(str(predicate.value).upper(), autoescape=True)
            elif predicate.operator is Operator.EQ:
                clause = column == predicate.value
            elif predicate.operator is Operator.GE:
                clause = column >= predicate.value
            elif predicate.operator is Operator.LE:
                clause = column <= predicate.value
            else:
                raise ValueError(f"Unsupported operator: {predicate.operator}")

            clauses.append(clause)
        return clauses

    def _to_domain(self, row: ShipRow) -> Ship:
        """
        Convert database model (ShipRow) to domain entity (Ship).

        Args:
            row: SQLAlchemy ShipRow model

        Returns:
            Ship domain entity with a UTC-aware prod_date
        """
        prod_date = row.prod_date
        if prod_date.tzinfo is None:  # SQLite drops the offset
            prod_date = prod_date.replace(tzinfo=timezone.utc)

        return Ship(
            id=row.id,
            name=row.name,
            planet=row.planet,
            ship_type=ShipType(row.ship_type),
            prod_date=prod_date.astimezone(timezone.utc),
            is_used=row.is_used,
            speed=row.speed,
            crew_size=row.crew_size,
            rating=row.rating,
        )
