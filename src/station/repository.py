"""In-memory station storage."""

import csv
from itertools import count
from pathlib import Path

from src.exceptions import StationNotFound

from .station import Station


class StationRepository:
    """Keeps stations by id; ids are assigned on save."""

    def __init__(self):
        self._stations: dict[int, Station] = {}
        self._ids = count(1)

    def save(self, name: str) -> Station:
        station = Station(id=next(self._ids), name=name)
        self._stations[station.id] = station
        return station

    def find_by_id(self, station_id: int) -> Station:
        try:
            return self._stations[station_id]
        except KeyError:
            raise StationNotFound(f"Station not found: {station_id}") from None

    def find_by_name(self, name: str) -> Station | None:
        for station in self._stations.values():
            if station.name == name:
                return station
        return None

    def find_all(self) -> list[Station]:
        return list(self._stations.values())

    def delete(self, station_id: int) -> None:
        if self._stations.pop(station_id, None) is None:
            raise StationNotFound(f"Station not found: {station_id}")

    def __len__(self) -> int:
        return len(self._stations)


def load_stations(repository: StationRepository, filepath: str | Path) -> int:
    """
    Load stations from CSV into the repository.

    Expected column: name. Blank and already known names are skipped.

    Returns:
        Number of stations added
    """
    filepath = Path(filepath)
    added = 0

    with open(filepath, encoding="utf-8") as f:
        reader = csv.DictReader(f)
        for row in reader:
            name = (row.get("name") or "").strip()
            if not name or repository.find_by_name(name) is not None:
                continue
            repository.save(name)
            added += 1

    return added
