from __future__ import annotations

from dataclasses import dataclass, field

from ship_registry.domain.ship import (
    DEFAULT_PAGE_NUMBER,
    DEFAULT_PAGE_SIZE,
    Paging,
    Ship,
    ShipFilters,
)
from ship_registry.domain.ship_query import build_predicates, build_sort
from ship_registry.ports.ship_repository import ShipRepository


@dataclass(frozen=True, slots=True)
class ListShipsRequest:
    filters: ShipFilters = field(default_factory=ShipFilters)
    page_number: int | None = None
    page_size: int | None = None


@dataclass(frozen=True, slots=True)
class ListShipsResponse:
    ships: list[Ship]
    paging: Paging


class ListShips:
    """
    Filtered, sorted and paginated ship listing.

    Missing paging values fall back to page 0 of size 3. Filtering and
    sorting are described as predicates; the repository executes them.
    """

    def __init__(self, ship_repository: ShipRepository) -> None:
        self._repository = ship_repository

    def execute(self, request: ListShipsRequest) -> ListShipsResponse:
        """
        Execute ship listing.

        Args:
            request: Filters and optional paging

        Returns:
            Response containing the requested page (possibly empty)

        Raises:
            BadRequestError: If paging parameters are invalid
        """
        paging = Paging(
            page_number=DEFAULT_PAGE_NUMBER if request.page_number is None else request.page_number,
            page_size=DEFAULT_PAGE_SIZE if request.page_size is None else request.page_size,
        )
        paging.validate()

        ships = self._repository.find(
            predicates=build_predicates(request.filters),
            sort=build_sort(request.filters),
            paging=paging,
        )

        return ListShipsResponse(ships=ships, paging=paging)
