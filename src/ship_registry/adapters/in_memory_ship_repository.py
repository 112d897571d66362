from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import asdict, replace
from typing import Any

from ship_registry.domain.ship import Paging, Ship, ShipDraft
from ship_registry.domain.ship_query import Predicate, Sort
from ship_registry.ports.ship_repository import ShipRepository


class InMemoryShipRepository(ShipRepository):
    """
    Canonical contract implementation for tests.

    - Assigns increasing identifiers that are never reused
    - Applies AND-semantics filtering
    - Sorts by the requested field, ties (and unsorted results) by id
    - Applies paging AFTER filtering and sorting
    """

    def __init__(self, ships: Iterable[Ship] = ()) -> None:
        self._ships: dict[int, Ship] = {ship.id: ship for ship in ships}
        self._next_id = max(self._ships, default=0) + 1

    def find(
        self,
        predicates: Sequence[Predicate],
        sort: Sort | None,
        paging: Paging,
    ) -> list[Ship]:
        # Trust that UseCase has validated inputs (contract programming)
        matches = self._matching(predicates)

        if sort is not None:
            matches.sort(key=lambda ship: (getattr(ship, sort.field), ship.id))

        start = paging.offset
        end = paging.offset + paging.limit

        return matches[start:end]

    def count(self, predicates: Sequence[Predicate]) -> int:
        return len(self._matching(predicates))

    def insert(self, draft: ShipDraft) -> int:
        ship_id = self._next_id
        self._next_id += 1
        self._ships[ship_id] = Ship(id=ship_id, **asdict(draft))
        return ship_id

    def get_by_id(self, ship_id: int, for_update: bool = False) -> Ship | None:
        return self._ships.get(ship_id)

    def exists_by_id(self, ship_id: int) -> bool:
        return ship_id in self._ships

    def update_fields(self, ship_id: int, changes: Mapping[str, Any]) -> None:
        if not changes or ship_id not in self._ships:
            return
        self._ships[ship_id] = replace(self._ships[ship_id], **changes)

    def delete_by_id(self, ship_id: int) -> None:
        self._ships.pop(ship_id, None)

    def _matching(self, predicates: Sequence[Predicate]) -> list[Ship]:
        ordered = sorted(self._ships.values(), key=lambda ship: ship.id)
        return [
            ship for ship in ordered if all(predicate.matches(ship) for predicate in predicates)
        ]
