"""
Storage-agnostic query description for ship searches.

A set of filters is folded into an ordered list of independent
predicates (AND semantics) plus an optional sort key. Adapters translate
each predicate into their own query language; the in-memory adapter
evaluates them directly with Predicate.matches().
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ship_registry.domain.ship import Ship, ShipFilters


class Operator(str, Enum):
    CONTAINS_IGNORE_CASE = "contains_ignore_case"
    EQ = "eq"
    GE = "ge"
    LE = "le"


@dataclass(frozen=True, slots=True)
class Predicate:
    field: str
    operator: Operator
    value: Any

    def matches(self, ship: Ship) -> bool:
        actual = getattr(ship, self.field)

        if self.operator is Operator.CONTAINS_IGNORE_CASE:
            return str(self.value).upper() in str(actual).upper()
        if self.operator is Operator.EQ:
            return actual == self.value
        if self.operator is Operator.GE:
            return actual >= self.value
        if self.operator is Operator.LE:
            return actual <= self.value

        raise ValueError(f"Unsupported operator: {self.operator}")


@dataclass(frozen=True, slots=True)
class Sort:
    field: str
    ascending: bool = True


def build_predicates(filters: ShipFilters) -> list[Predicate]:
    """
    Translate filters into conjunctive predicates.

    Only present (non-None) filters produce a predicate; an empty list
    means "match all". Range bounds are inclusive.
    """
    predicates: list[Predicate] = []

    # Case-insensitive substring match
    if filters.name is not None:
        predicates.append(Predicate("name", Operator.CONTAINS_IGNORE_CASE, filters.name))
    if filters.planet is not None:
        predicates.append(Predicate("planet", Operator.CONTAINS_IGNORE_CASE, filters.planet))

    # Stored as the canonical tag name
    if filters.ship_type is not None:
        predicates.append(Predicate("ship_type", Operator.EQ, filters.ship_type.value))

    if filters.after is not None:
        predicates.append(Predicate("prod_date", Operator.GE, filters.after))
    if filters.before is not None:
        predicates.append(Predicate("prod_date", Operator.LE, filters.before))

    if filters.is_used is not None:
        predicates.append(Predicate("is_used", Operator.EQ, filters.is_used))

    if filters.min_speed is not None:
        predicates.append(Predicate("speed", Operator.GE, filters.min_speed))
    if filters.max_speed is not None:
        predicates.append(Predicate("speed", Operator.LE, filters.max_speed))

    if filters.min_crew_size is not None:
        predicates.append(Predicate("crew_size", Operator.GE, filters.min_crew_size))
    if filters.max_crew_size is not None:
        predicates.append(Predicate("crew_size", Operator.LE, filters.max_crew_size))

    if filters.min_rating is not None:
        predicates.append(Predicate("rating", Operator.GE, filters.min_rating))
    if filters.max_rating is not None:
        predicates.append(Predicate("rating", Operator.LE, filters.max_rating))

    return predicates


def build_sort(filters: ShipFilters) -> Sort | None:
    """Ascending sort on the requested field, or None when no order is requested."""
    if filters.order is None:
        return None
    return Sort(field=filters.order.field_name, ascending=True)
