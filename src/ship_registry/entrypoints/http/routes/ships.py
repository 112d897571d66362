from fastapi import APIRouter, Depends, Response, status

from ship_registry.entrypoints.http.dependencies import (
    get_count_ships_use_case,
    get_create_ship_use_case,
    get_delete_ship_use_case,
    get_get_ship_use_case,
    get_list_ships_use_case,
    get_update_ship_use_case,
)
from ship_registry.entrypoints.http.dtos.ship import (
    ShipPayloadDTO,
    ShipResponseDTO,
    ShipsQueryDTO,
)
from ship_registry.entrypoints.http.error_responses import ErrorResponse
from ship_registry.entrypoints.http.mappers.ship_mapper import ShipMapper
from ship_registry.use_cases.count_ships import CountShips, CountShipsRequest
from ship_registry.use_cases.create_ship import CreateShip, CreateShipRequest
from ship_registry.use_cases.delete_ship import DeleteShip, DeleteShipRequest
from ship_registry.use_cases.get_ship import GetShip, GetShipRequest
from ship_registry.use_cases.list_ships import ListShips
from ship_registry.use_cases.update_ship import UpdateShip, UpdateShipRequest

router = APIRouter(tags=["Ships"])

BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Invalid input"}}
NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Ship not found"}}


@router.get(
    "/ships",
    response_model=list[ShipResponseDTO],
    summary="List ships",
    description="""
    List ships with optional filters, ascending sort and pagination.

    ## Filters
    - All filters use AND semantics
    - name/planet: case-insensitive substring match
    - after/before: inclusive epoch-millisecond bounds on prodDate
    - speed/crewSize/rating: inclusive min/max ranges

    ## Pagination
    - pageNumber defaults to 0, pageSize to 3 (max 200)

    ## Example
    ```
    GET /rest/ships?name=fal&order=SPEED&pageSize=10
    ```
    """,
    responses=BAD_REQUEST,
)
def list_ships(
    query: ShipsQueryDTO = Depends(),
    use_case: ListShips = Depends(get_list_ships_use_case),
) -> list[ShipResponseDTO]:
    """List ships endpoint following parse → execute → map → return pattern."""
    request = ShipMapper.to_list_request(query)

    result = use_case.execute(request)

    return [ShipMapper.to_response(ship) for ship in result.ships]


# Declared before /ships/{ship_id} so "count" is not parsed as an identifier
@router.get(
    "/ships/count",
    response_model=int,
    summary="Count ships",
    description="Number of ships matching the same filters as the list endpoint, ignoring paging.",
    responses=BAD_REQUEST,
)
def count_ships(
    query: ShipsQueryDTO = Depends(),
    use_case: CountShips = Depends(get_count_ships_use_case),
) -> int:
    return use_case.execute(CountShipsRequest(filters=ShipMapper.to_domain_filters(query)))


@router.post(
    "/ships",
    response_model=ShipResponseDTO,
    summary="Create ship",
    description="""
    Create a ship. name, planet, shipType, prodDate, speed and crewSize are required;
    isUsed defaults to false. The rating is always computed by the server.
    """,
    responses=BAD_REQUEST,
)
def create_ship(
    payload: ShipPayloadDTO,
    use_case: CreateShip = Depends(get_create_ship_use_case),
) -> ShipResponseDTO:
    request = CreateShipRequest(payload=ShipMapper.to_domain_payload(payload))

    result = use_case.execute(request)

    return ShipMapper.to_response(result.ship)


@router.get(
    "/ships/{ship_id}",
    response_model=ShipResponseDTO,
    summary="Get ship by ID",
    responses={**BAD_REQUEST, **NOT_FOUND},
)
def get_ship(
    ship_id: int,
    use_case: GetShip = Depends(get_get_ship_use_case),
) -> ShipResponseDTO:
    result = use_case.execute(GetShipRequest(ship_id=ship_id))
    return ShipMapper.to_response(result.ship)


@router.post(
    "/ships/{ship_id}",
    response_model=ShipResponseDTO,
    summary="Update ship",
    description="""
    Partial update: only fields present (and non-null) in the body are changed.
    The rating is recomputed when prodDate, isUsed or speed change.
    """,
    responses={**BAD_REQUEST, **NOT_FOUND},
)
def update_ship(
    ship_id: int,
    payload: ShipPayloadDTO,
    use_case: UpdateShip = Depends(get_update_ship_use_case),
) -> ShipResponseDTO:
    request = UpdateShipRequest(
        ship_id=ship_id,
        payload=ShipMapper.to_domain_payload(payload),
    )

    result = use_case.execute(request)

    return ShipMapper.to_response(result.ship)


@router.delete(
    "/ships/{ship_id}",
    response_class=Response,
    summary="Delete ship",
    responses={**BAD_REQUEST, **NOT_FOUND},
)
def delete_ship(
    ship_id: int,
    use_case: DeleteShip = Depends(get_delete_ship_use_case),
) -> Response:
    use_case.execute(DeleteShipRequest(ship_id=ship_id))
    return Response(status_code=status.HTTP_200_OK)
