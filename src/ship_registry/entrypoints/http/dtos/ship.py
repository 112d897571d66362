"""Wire shapes for the ship endpoints.

Field names are camelCase to match the public JSON contract; the mapper
converts them to the snake_case domain model.
"""

from pydantic import BaseModel, ConfigDict, Field

from ship_registry.domain.ship import ShipOrder, ShipType


class ShipResponseDTO(BaseModel):
    id: int
    name: str
    planet: str
    shipType: ShipType
    prodDate: int = Field(description="Production date as epoch milliseconds (UTC)")
    isUsed: bool
    speed: float
    crewSize: int
    rating: float


class ShipPayloadDTO(BaseModel):
    """
    Request body for creating or updating a ship.

    Every field is optional here; missing or null fields are "not provided".
    Mandatory fields for creation are enforced by the domain.
    """

    name: str | None = Field(default=None, examples=["Falcon"])
    planet: str | None = Field(default=None, examples=["Earth"])
    shipType: ShipType | None = Field(default=None, examples=["TRANSPORT"])
    prodDate: int | None = Field(
        default=None,
        description="Production date as epoch milliseconds (UTC), year 2800-3019",
        examples=[29033596800000],
    )
    isUsed: bool | None = Field(default=None, examples=[False])
    speed: float | None = Field(default=None, description="0.01 - 0.99", examples=[0.5])
    crewSize: int | None = Field(default=None, description="1 - 9999", examples=[10])

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Falcon",
                "planet": "Earth",
                "shipType": "TRANSPORT",
                "prodDate": 29033596800000,
                "isUsed": False,
                "speed": 0.5,
                "crewSize": 10,
            }
        }
    )


class ShipsQueryDTO(BaseModel):
    """Query parameters for listing and counting ships."""

    name: str | None = Field(
        default=None,
        description="Filter by name (case-insensitive substring)",
        examples=["fal"],
    )
    planet: str | None = Field(
        default=None,
        description="Filter by planet (case-insensitive substring)",
        examples=["ear"],
    )
    shipType: ShipType | None = Field(default=None, description="Exact ship type")
    after: int | None = Field(
        default=None,
        description="Produced at or after (epoch milliseconds, inclusive)",
    )
    before: int | None = Field(
        default=None,
        description="Produced at or before (epoch milliseconds, inclusive)",
    )
    isUsed: bool | None = Field(default=None, description="Used flag")
    minSpeed: float | None = Field(default=None, description="Minimum speed (inclusive)")
    maxSpeed: float | None = Field(default=None, description="Maximum speed (inclusive)")
    minCrewSize: int | None = Field(default=None, description="Minimum crew size (inclusive)")
    maxCrewSize: int | None = Field(default=None, description="Maximum crew size (inclusive)")
    minRating: float | None = Field(default=None, description="Minimum rating (inclusive)")
    maxRating: float | None = Field(default=None, description="Maximum rating (inclusive)")
    order: ShipOrder | None = Field(default=None, description="Ascending sort field")
    pageNumber: int | None = Field(default=None, description="Page index (default 0)")
    pageSize: int | None = Field(default=None, description="Page size (default 3, max 200)")
