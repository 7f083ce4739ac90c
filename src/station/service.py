"""Station use cases."""

import logging

from src.exceptions import DuplicateStationName

from .repository import StationRepository
from .station import Station

logger = logging.getLogger(__name__)


class StationService:
    """Create, resolve and delete stations."""

    def __init__(self, station_repository: StationRepository):
        self.station_repository = station_repository

    def create_station(self, name: str) -> Station:
        if self.station_repository.find_by_name(name) is not None:
            logger.warning("Station name already taken: %s", name)
            raise DuplicateStationName(f"Station already exists: {name}")
        station = self.station_repository.save(name)
        logger.info("Created station %s (id=%d)", station.name, station.id)
        return station

    def find_station_by_id(self, station_id: int) -> Station:
        return self.station_repository.find_by_id(station_id)

    def find_all_stations(self) -> list[Station]:
        return self.station_repository.find_all()

    def delete_station(self, station_id: int) -> None:
        self.station_repository.delete(station_id)
        logger.info("Deleted station id=%d", station_id)
