from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any

from ship_registry.domain.ship import Paging, Ship, ShipDraft
from ship_registry.domain.ship_query import Predicate, Sort


class ShipRepository(ABC):
    """
    Port for ship persistence.

    Contract (Preconditions):
        - predicates, paging and payload values are pre-validated by the caller (UseCase)
        - Implementations trust inputs are valid and do not re-validate

    Ordering:
        - Results are sorted by `sort` when given, with ties broken by id ascending
        - Without `sort`, results are ordered by id ascending
    """

    @abstractmethod
    def find(
        self,
        predicates: Sequence[Predicate],
        sort: Sort | None,
        paging: Paging,
    ) -> list[Ship]:
        """
        Return ships matching every predicate, sorted, then paginated.

        Args:
            predicates: Conjunctive predicates (empty = match all)
            sort: Optional ascending sort key
            paging: Page to return (applied after filtering and sorting)
        """
        ...

    @abstractmethod
    def count(self, predicates: Sequence[Predicate]) -> int:
        """Return the number of ships matching every predicate (no paging)."""
        ...

    @abstractmethod
    def insert(self, draft: ShipDraft) -> int:
        """Persist a new ship and return its storage-assigned identifier."""
        ...

    @abstractmethod
    def get_by_id(self, ship_id: int, for_update: bool = False) -> Ship | None:
        """
        Get ship by ID.

        Args:
            ship_id: Ship identifier
            for_update: Lock the row until the surrounding transaction ends

        Returns:
            Ship if found, None otherwise
        """
        ...

    @abstractmethod
    def exists_by_id(self, ship_id: int) -> bool: ...

    @abstractmethod
    def update_fields(self, ship_id: int, changes: Mapping[str, Any]) -> None:
        """
        Write all `changes` (domain field name -> value) in a single update.

        An empty mapping is a no-op: nothing is written.
        """
        ...

    @abstractmethod
    def delete_by_id(self, ship_id: int) -> None: ...
