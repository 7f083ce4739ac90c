"""Path queries by station id."""

import logging

from src.station import StationService

from .dijkstra import Path, PathFinder

logger = logging.getLogger(__name__)


class PathService:
    def __init__(self, path_finder: PathFinder, station_service: StationService):
        self.path_finder = path_finder
        self.station_service = station_service

    def find_path(self, source_id: int, target_id: int) -> Path:
        source = self.station_service.find_station_by_id(source_id)
        target = self.station_service.find_station_by_id(target_id)
        path = self.path_finder.find_path(source, target)
        logger.info(
            "Path %s -> %s: %d stations, distance %d",
            source.name, target.name, len(path.stations), path.distance,
        )
        return path
