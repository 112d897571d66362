from ship_registry.infra.db.models.base import Base
from ship_registry.infra.db.models.ship import ShipRow

__all__ = ["Base", "ShipRow"]
