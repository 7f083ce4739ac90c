"""Station entity, storage and lookup."""

from .repository import StationRepository, load_stations
from .service import StationService
from .station import Station

__all__ = ["Station", "StationRepository", "StationService", "load_stations"]
