from __future__ import annotations

from datetime import datetime
from typing import Any

from ship_registry.domain.errors import BadRequestError
from ship_registry.domain.ship import (
    UNSET,
    Ship,
    ShipFilters,
    ShipPayload,
    from_epoch_millis,
    to_epoch_millis,
)
from ship_registry.entrypoints.http.dtos.ship import (
    ShipPayloadDTO,
    ShipResponseDTO,
    ShipsQueryDTO,
)
from ship_registry.use_cases.list_ships import ListShipsRequest


def _provided(value: Any) -> Any:
    """JSON null means "not provided"."""
    return UNSET if value is None else value


class ShipMapper:
    """Maps between REST DTOs and domain models for ships."""

    @staticmethod
    def to_domain_filters(dto: ShipsQueryDTO) -> ShipFilters:
        """
        Converts query params to domain filters.

        Handles epoch milliseconds → datetime conversion at the boundary.

        Raises:
            BadRequestError: If a timestamp bound is outside the representable range
        """
        return ShipFilters(
            name=dto.name,
            planet=dto.planet,
            ship_type=dto.shipType,
            after=ShipMapper._to_datetime("after", dto.after),
            before=ShipMapper._to_datetime("before", dto.before),
            is_used=dto.isUsed,
            min_speed=dto.minSpeed,
            max_speed=dto.maxSpeed,
            min_crew_size=dto.minCrewSize,
            max_crew_size=dto.maxCrewSize,
            min_rating=dto.minRating,
            max_rating=dto.maxRating,
            order=dto.order,
        )

    @staticmethod
    def to_list_request(dto: ShipsQueryDTO) -> ListShipsRequest:
        """Builds the list request; missing paging stays None for the use case to default."""
        return ListShipsRequest(
            filters=ShipMapper.to_domain_filters(dto),
            page_number=dto.pageNumber,
            page_size=dto.pageSize,
        )

    @staticmethod
    def to_domain_payload(dto: ShipPayloadDTO) -> ShipPayload:
        """
        Converts a request body to a presence-aware domain payload.

        Fields that are missing or null become UNSET, so they are
        neither validated nor written.
        """
        return ShipPayload(
            name=_provided(dto.name),
            planet=_provided(dto.planet),
            ship_type=_provided(dto.shipType),
            prod_date=_provided(dto.prodDate),
            is_used=_provided(dto.isUsed),
            speed=_provided(dto.speed),
            crew_size=_provided(dto.crewSize),
        )

    @staticmethod
    def to_response(ship: Ship) -> ShipResponseDTO:
        """Converts domain Ship to its REST shape (datetime → epoch milliseconds)."""
        return ShipResponseDTO(
            id=ship.id,
            name=ship.name,
            planet=ship.planet,
            shipType=ship.ship_type,
            prodDate=to_epoch_millis(ship.prod_date),
            isUsed=ship.is_used,
            speed=ship.speed,
            crewSize=ship.crew_size,
            rating=ship.rating,
        )

    @staticmethod
    def _to_datetime(field: str, millis: int | None) -> datetime | None:
        if millis is None:
            return None
        try:
            return from_epoch_millis(millis)
        except OverflowError:
            raise BadRequestError(
                errors=[
                    {
                        "field": field,
                        "message": f"Timestamp out of range: {millis}",
                        "code": "OUT_OF_RANGE",
                    }
                ]
            )
