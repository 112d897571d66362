from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any

from ship_registry.domain.errors import BadRequestError

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

DEFAULT_PAGE_NUMBER = 0
DEFAULT_PAGE_SIZE = 3
MAX_PAGE_SIZE = 200
# Largest OFFSET a signed 64-bit database integer can hold
MAX_OFFSET = 2**63 - 1


class ShipType(str, Enum):
    TRANSPORT = "TRANSPORT"
    MILITARY = "MILITARY"
    MERCHANT = "MERCHANT"


class ShipOrder(str, Enum):
    """Sortable ship attributes (ascending only)."""

    ID = "ID"
    SPEED = "SPEED"
    DATE = "DATE"
    RATING = "RATING"

    @property
    def field_name(self) -> str:
        return _ORDER_FIELDS[self]


_ORDER_FIELDS = {
    ShipOrder.ID: "id",
    ShipOrder.SPEED: "speed",
    ShipOrder.DATE: "prod_date",
    ShipOrder.RATING: "rating",
}


def from_epoch_millis(millis: int) -> datetime:
    """Convert epoch milliseconds to an aware UTC datetime.

    Raises:
        OverflowError: If the value is outside the representable date range
    """
    return EPOCH + timedelta(milliseconds=millis)


def to_epoch_millis(value: datetime) -> int:
    return (value - EPOCH) // timedelta(milliseconds=1)


@dataclass(frozen=True)
class ShipDraft:
    """A ship that has not been persisted yet (no identifier)."""

    name: str
    planet: str
    ship_type: ShipType
    prod_date: datetime
    is_used: bool
    speed: float
    crew_size: int
    rating: float


@dataclass(frozen=True)
class Ship:
    id: int
    name: str
    planet: str
    ship_type: ShipType
    prod_date: datetime
    is_used: bool
    speed: float
    crew_size: int
    rating: float

    @property
    def production_year(self) -> int:
        return self.prod_date.astimezone(timezone.utc).year


class _Unset:
    """Marker for payload fields the client did not send."""

    _instance: _Unset | None = None

    def __new__(cls) -> _Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


@dataclass(frozen=True, slots=True)
class ShipPayload:
    """
    Create/update input with explicit field presence.

    Fields the client did not send hold UNSET, never None, so an update
    cannot confuse "not provided" with a real value.
    prod_date stays in epoch milliseconds until validated.
    """

    name: str = UNSET
    planet: str = UNSET
    ship_type: ShipType = UNSET
    prod_date: int = UNSET
    is_used: bool = UNSET
    speed: float = UNSET
    crew_size: int = UNSET

    def has(self, field_name: str) -> bool:
        return getattr(self, field_name) is not UNSET

    def provided(self) -> dict[str, Any]:
        """Return only the fields that were sent, keyed by field name."""
        return {
            field.name: getattr(self, field.name)
            for field in fields(self)
            if self.has(field.name)
        }


@dataclass(frozen=True, slots=True)
class ShipFilters:
    name: str | None = None
    planet: str | None = None
    ship_type: ShipType | None = None
    after: datetime | None = None
    before: datetime | None = None
    is_used: bool | None = None
    min_speed: float | None = None
    max_speed: float | None = None
    min_crew_size: int | None = None
    max_crew_size: int | None = None
    min_rating: float | None = None
    max_rating: float | None = None
    order: ShipOrder | None = None


@dataclass(frozen=True, slots=True)
class Paging:
    page_number: int = DEFAULT_PAGE_NUMBER
    page_size: int = DEFAULT_PAGE_SIZE

    @property
    def offset(self) -> int:
        return self.page_number * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size

    def validate(self) -> None:
        """
        Validate paging parameters.

        Raises:
            BadRequestError: If paging parameters are invalid
        """
        if self.page_number < 0:
            raise BadRequestError("pageNumber must be >= 0")
        if self.page_size <= 0:
            raise BadRequestError("pageSize must be > 0")
        if self.page_size > MAX_PAGE_SIZE:
            raise BadRequestError(f"pageSize must be <= {MAX_PAGE_SIZE}")
        if self.offset > MAX_OFFSET:
            raise BadRequestError("pageNumber is too large")
