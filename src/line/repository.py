"""In-memory line storage and CSV network loading."""

import csv
import logging
from itertools import count
from pathlib import Path

from src.exceptions import LineNotFound, SubwayException
from src.station import StationRepository

from .line import Line

logger = logging.getLogger(__name__)


class LineRepository:
    """Keeps lines by id; ids are assigned on first save."""

    def __init__(self):
        self._lines: dict[int, Line] = {}
        self._ids = count(1)

    def save(self, line: Line) -> Line:
        if line.id is None:
            line.id = next(self._ids)
        self._lines[line.id] = line
        return line

    def find_by_id(self, line_id: int) -> Line:
        try:
            return self._lines[line_id]
        except KeyError:
            raise LineNotFound(f"Line not found: {line_id}") from None

    def find_by_name(self, name: str) -> Line | None:
        for line in self._lines.values():
            if line.name == name:
                return line
        return None

    def find_all(self) -> list[Line]:
        return list(self._lines.values())

    def delete(self, line_id: int) -> None:
        if self._lines.pop(line_id, None) is None:
            raise LineNotFound(f"Line not found: {line_id}")

    def __len__(self) -> int:
        return len(self._lines)


def load_sections(
    line_repository: LineRepository,
    station_repository: StationRepository,
    filepath: str | Path,
) -> int:
    """
    Load lines from a sections CSV.

    Expected columns: line, color, up_station, down_station, distance

    The first row of a line creates it; later rows are attached in file order
    through Line.add_section, so every row must touch the line built so far.
    Stations missing from the repository are created. Rows with missing
    fields, a non-numeric distance, or a section the line rejects are
    skipped and logged; stations named by such a row stay registered.

    Returns:
        Number of sections loaded
    """
    filepath = Path(filepath)
    loaded = 0
    skipped = 0

    with open(filepath, encoding="utf-8") as f:
        reader = csv.DictReader(f)
        for row_number, row in enumerate(reader, start=2):
            try:
                name, up_name, down_name = (
                    (row.get(column) or "").strip()
                    for column in ("line", "up_station", "down_station")
                )
                if not (name and up_name and down_name):
                    raise ValueError("missing line or station name")
                distance = int(row["distance"])

                up_station = _station_by_name(station_repository, up_name)
                down_station = _station_by_name(station_repository, down_name)
                line = line_repository.find_by_name(name)
                if line is None:
                    line = Line.create(
                        name,
                        (row.get("color") or "").strip(),
                        up_station,
                        down_station,
                        distance,
                    )
                    line_repository.save(line)
                else:
                    line.add_section(up_station, down_station, distance)
                loaded += 1
            except (SubwayException, ValueError, KeyError, TypeError) as e:
                logger.warning("Skipping %s row %d: %s", filepath.name, row_number, e)
                skipped += 1

    if skipped:
        logger.warning("Skipped %d of %d section rows", skipped, loaded + skipped)
    return loaded


def _station_by_name(repository: StationRepository, name: str):
    station = repository.find_by_name(name)
    if station is None:
        station = repository.save(name)
    return station
