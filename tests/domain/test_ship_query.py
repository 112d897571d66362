"""Tests for the filter → predicate/sort translation."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from ship_registry.domain.ship import Ship, ShipFilters, ShipOrder, ShipType
from ship_registry.domain.ship_query import (
    Operator,
    Predicate,
    Sort,
    build_predicates,
    build_sort,
)

AFTER = datetime(2850, 1, 1, tzinfo=timezone.utc)
BEFORE = datetime(3000, 1, 1, tzinfo=timezone.utc)


def test_no_filters_means_no_predicates() -> None:
    assert build_predicates(ShipFilters()) == []


def test_all_filters_in_fixed_order() -> None:
    filters = ShipFilters(
        name="fal",
        planet="ear",
        ship_type=ShipType.MILITARY,
        after=AFTER,
        before=BEFORE,
        is_used=True,
        min_speed=0.1,
        max_speed=0.9,
        min_crew_size=1,
        max_crew_size=100,
        min_rating=0.5,
        max_rating=5.0,
    )

    assert build_predicates(filters) == [
        Predicate("name", Operator.CONTAINS_IGNORE_CASE, "fal"),
        Predicate("planet", Operator.CONTAINS_IGNORE_CASE, "ear"),
        Predicate("ship_type", Operator.EQ, "MILITARY"),
        Predicate("prod_date", Operator.GE, AFTER),
        Predicate("prod_date", Operator.LE, BEFORE),
        Predicate("is_used", Operator.EQ, True),
        Predicate("speed", Operator.GE, 0.1),
        Predicate("speed", Operator.LE, 0.9),
        Predicate("crew_size", Operator.GE, 1),
        Predicate("crew_size", Operator.LE, 100),
        Predicate("rating", Operator.GE, 0.5),
        Predicate("rating", Operator.LE, 5.0),
    ]


def test_false_flag_is_a_filter() -> None:
    assert build_predicates(ShipFilters(is_used=False)) == [
        Predicate("is_used", Operator.EQ, False)
    ]


def test_single_sided_range() -> None:
    assert build_predicates(ShipFilters(max_crew_size=10)) == [
        Predicate("crew_size", Operator.LE, 10)
    ]


def test_order_does_not_produce_predicates() -> None:
    assert build_predicates(ShipFilters(order=ShipOrder.SPEED)) == []


# ==============================================================================
# Predicate.matches
# ==============================================================================


def test_contains_ignore_case_matches_substring(make_ship) -> None:
    predicate = Predicate("name", Operator.CONTAINS_IGNORE_CASE, "fAL")

    assert predicate.matches(make_ship(name="Falcon"))
    assert predicate.matches(make_ship(name="Millennium FALCON"))
    assert not predicate.matches(make_ship(name="Orion"))


def test_ship_type_predicate_matches_enum_member(make_ship) -> None:
    predicate = build_predicates(ShipFilters(ship_type=ShipType.TRANSPORT))[0]

    assert predicate.matches(make_ship(ship_type=ShipType.TRANSPORT))
    assert not predicate.matches(make_ship(ship_type=ShipType.MERCHANT))


@pytest.mark.parametrize(
    ("operator", "speed", "expected"),
    [
        (Operator.GE, 0.5, True),
        (Operator.GE, 0.49, False),
        (Operator.LE, 0.5, True),
        (Operator.LE, 0.51, False),
    ],
)
def test_range_bounds_are_inclusive(make_ship, operator: Operator, speed: float, expected: bool) -> None:
    ship: Ship = make_ship(speed=0.5)

    assert Predicate("speed", operator, speed).matches(ship) is expected


def test_date_bounds(make_ship) -> None:
    ship = make_ship(prod_date=AFTER)

    assert Predicate("prod_date", Operator.GE, AFTER).matches(ship)
    assert Predicate("prod_date", Operator.LE, AFTER).matches(ship)
    assert not Predicate("prod_date", Operator.GE, BEFORE).matches(ship)


# ==============================================================================
# build_sort
# ==============================================================================


def test_no_order_means_no_sort() -> None:
    assert build_sort(ShipFilters()) is None


@pytest.mark.parametrize(
    ("order", "field"),
    [
        (ShipOrder.ID, "id"),
        (ShipOrder.SPEED, "speed"),
        (ShipOrder.DATE, "prod_date"),
        (ShipOrder.RATING, "rating"),
    ],
)
def test_sort_is_ascending_on_order_field(order: ShipOrder, field: str) -> None:
    assert build_sort(ShipFilters(order=order)) == Sort(field=field, ascending=True)
