"""Test suite for UpdateShip use case."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable
from unittest.mock import Mock

import pytest

from ship_registry.adapters.in_memory_ship_repository import InMemoryShipRepository
from ship_registry.domain.errors import BadRequestError, NotFoundError
from ship_registry.domain.ship import Ship, ShipPayload, ShipType
from ship_registry.ports.ship_repository import ShipRepository
from ship_registry.use_cases.update_ship import UpdateShip, UpdateShipRequest, UpdateShipResponse


@pytest.fixture()
def repository(make_ship: Callable[..., Ship]) -> InMemoryShipRepository:
    """Single stored ship: Falcon, new, speed 0.5, built 2900, rating 0.33."""
    return InMemoryShipRepository([make_ship(id=1)])


@pytest.fixture()
def mock_repository(make_ship: Callable[..., Ship]) -> Mock:
    repository = Mock(spec=ShipRepository)
    repository.exists_by_id.return_value = True
    repository.get_by_id.return_value = make_ship(id=1)
    return repository


def _update(repository: ShipRepository, ship_id: int = 1, **fields) -> UpdateShipResponse:
    request = UpdateShipRequest(ship_id=ship_id, payload=ShipPayload(**fields))
    return UpdateShip(ship_repository=repository).execute(request)


# ==============================================================================
# Rating recomputation
# ==============================================================================


def test_marking_used_halves_rating(repository: InMemoryShipRepository) -> None:
    result = _update(repository, is_used=True)

    assert result.ship.is_used is True
    assert result.ship.rating == 0.17


def test_speed_change_recomputes_rating(repository: InMemoryShipRepository) -> None:
    result = _update(repository, speed=0.9)

    assert result.ship.speed == 0.9
    assert result.ship.rating == 0.6


def test_prod_date_change_recomputes_rating(
    repository: InMemoryShipRepository, year_millis: Callable[[int], int]
) -> None:
    result = _update(repository, prod_date=year_millis(3019))

    assert result.ship.prod_date == datetime(3019, 1, 1, tzinfo=timezone.utc)
    assert result.ship.rating == 40.0


def test_rating_uses_stored_values_for_absent_inputs(
    make_ship: Callable[..., Ship],
) -> None:
    repository = InMemoryShipRepository(
        [make_ship(id=1, is_used=True, speed=0.9, prod_date=datetime(3018, 5, 1, tzinfo=timezone.utc))]
    )

    result = _update(repository, speed=0.2)

    # 80 * 0.2 * 0.5 / (3019 - 3018 + 1)
    assert result.ship.rating == 4.0


def test_non_rating_update_keeps_rating(repository: InMemoryShipRepository) -> None:
    result = _update(repository, name="Renamed", ship_type=ShipType.MILITARY)

    assert result.ship.name == "Renamed"
    assert result.ship.ship_type is ShipType.MILITARY
    assert result.ship.rating == 0.33


def test_non_rating_update_skips_locked_read(mock_repository: Mock) -> None:
    _update(mock_repository, crew_size=20)

    mock_repository.update_fields.assert_called_once_with(1, {"crew_size": 20})
    for call in mock_repository.get_by_id.call_args_list:
        assert call.kwargs.get("for_update", False) is False


def test_rating_input_is_read_with_lock(mock_repository: Mock) -> None:
    _update(mock_repository, speed=0.9)

    mock_repository.get_by_id.assert_any_call(1, for_update=True)


def test_all_changes_written_in_single_call(mock_repository: Mock) -> None:
    _update(mock_repository, name="Renamed", is_used=True)

    mock_repository.update_fields.assert_called_once_with(
        1, {"name": "Renamed", "is_used": True, "rating": 0.17}
    )


# ==============================================================================
# Partial update semantics
# ==============================================================================


def test_absent_fields_are_untouched(repository: InMemoryShipRepository) -> None:
    before = repository.get_by_id(1)

    result = _update(repository, planet="Mars")

    assert result.ship.planet == "Mars"
    assert result.ship.name == before.name
    assert result.ship.speed == before.speed
    assert result.ship.prod_date == before.prod_date


def test_empty_payload_is_a_no_op(repository: InMemoryShipRepository) -> None:
    before = repository.get_by_id(1)

    result = _update(repository)

    assert isinstance(result, UpdateShipResponse)
    assert result.ship == before


# ==============================================================================
# Error cases
# ==============================================================================


def test_missing_ship_is_not_found(repository: InMemoryShipRepository) -> None:
    with pytest.raises(NotFoundError):
        _update(repository, ship_id=999, name="Ghost")


def test_invalid_id_is_bad_request(mock_repository: Mock) -> None:
    with pytest.raises(BadRequestError):
        _update(mock_repository, ship_id=-1, name="Ghost")

    mock_repository.update_fields.assert_not_called()


def test_invalid_field_is_rejected_without_writing(mock_repository: Mock) -> None:
    with pytest.raises(BadRequestError) as exc_info:
        _update(mock_repository, crew_size=10000)

    assert exc_info.value.errors[0]["field"] == "crew_size"
    mock_repository.update_fields.assert_not_called()


def test_empty_name_is_rejected(repository: InMemoryShipRepository) -> None:
    with pytest.raises(BadRequestError):
        _update(repository, name="")

    assert repository.get_by_id(1).name == "Falcon"


def test_ship_deleted_before_re_read_is_not_found(mock_repository: Mock) -> None:
    mock_repository.get_by_id.return_value = None

    with pytest.raises(NotFoundError):
        _update(mock_repository, name="Renamed")
