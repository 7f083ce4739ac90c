"""Line use cases."""

import logging

from src.exceptions import DuplicateLineName, SubwayException
from src.station import StationService

from .line import Line
from .repository import LineRepository

logger = logging.getLogger(__name__)


class LineService:
    """Create lines and change their sections, resolving stations by id."""

    def __init__(self, line_repository: LineRepository, station_service: StationService):
        self.line_repository = line_repository
        self.station_service = station_service

    def create_line(
        self,
        name: str,
        color: str,
        up_station_id: int,
        down_station_id: int,
        distance: int,
    ) -> Line:
        if self.line_repository.find_by_name(name) is not None:
            raise DuplicateLineName(f"Line already exists: {name}")
        up_station = self.station_service.find_station_by_id(up_station_id)
        down_station = self.station_service.find_station_by_id(down_station_id)
        line = self.line_repository.save(
            Line.create(name, color, up_station, down_station, distance)
        )
        logger.info("Created line %s (id=%d)", line.name, line.id)
        return line

    def find_all_lines(self) -> list[Line]:
        return self.line_repository.find_all()

    def find_line_by_id(self, line_id: int) -> Line:
        return self.line_repository.find_by_id(line_id)

    def update_line(self, line_id: int, name: str, color: str) -> Line:
        line = self.line_repository.find_by_id(line_id)
        other = self.line_repository.find_by_name(name)
        if other is not None and other.id != line_id:
            raise DuplicateLineName(f"Line already exists: {name}")
        line.update(name, color)
        return self.line_repository.save(line)

    def delete_line(self, line_id: int) -> None:
        self.line_repository.delete(line_id)
        logger.info("Deleted line id=%d", line_id)

    def add_section(
        self,
        line_id: int,
        up_station_id: int,
        down_station_id: int,
        distance: int,
    ) -> Line:
        line = self.line_repository.find_by_id(line_id)
        up_station = self.station_service.find_station_by_id(up_station_id)
        down_station = self.station_service.find_station_by_id(down_station_id)
        try:
            line.add_section(up_station, down_station, distance)
        except SubwayException as e:
            logger.warning(
                "Rejected section %s->%s on %s: %s",
                up_station.name, down_station.name, line.name, e.code,
            )
            raise
        logger.info(
            "Added section %s->%s (%d) to %s",
            up_station.name, down_station.name, distance, line.name,
        )
        return self.line_repository.save(line)

    def remove_section(self, line_id: int, station_id: int) -> Line:
        line = self.line_repository.find_by_id(line_id)
        station = self.station_service.find_station_by_id(station_id)
        try:
            line.remove_section(station)
        except SubwayException as e:
            logger.warning(
                "Rejected removal of %s from %s: %s", station.name, line.name, e.code
            )
            raise
        logger.info("Removed %s from %s", station.name, line.name)
        return self.line_repository.save(line)
