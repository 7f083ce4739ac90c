"""Section: a directed, weighted edge between two adjacent stations."""

from dataclasses import dataclass

from src.exceptions import InvalidDistance, SameStationSection
from src.station import Station


@dataclass(frozen=True)
class Section:
    """One hop of a line, from up_station to down_station."""

    up_station: Station
    down_station: Station
    distance: int

    def __post_init__(self):
        if self.distance <= 0:
            raise InvalidDistance(f"Distance must be positive: {self.distance}")
        if self.up_station == self.down_station:
            raise SameStationSection(
                f"Section cannot start and end at {self.up_station.name}"
            )

    def split_down(self, section: "Section") -> tuple["Section", "Section"]:
        """
        Split this section at section.down_station.

        (A->C, d) split by (A->B, d1) gives (A->B, d1), (B->C, d - d1).
        """
        self._check_split_distance(section)
        return section, Section(
            section.down_station, self.down_station, self.distance - section.distance
        )

    def split_up(self, section: "Section") -> tuple["Section", "Section"]:
        """
        Split this section at section.up_station.

        (A->C, d) split by (B->C, d2) gives (A->B, d - d2), (B->C, d2).
        """
        self._check_split_distance(section)
        return Section(
            self.up_station, section.up_station, self.distance - section.distance
        ), section

    def merge(self, next_section: "Section") -> "Section":
        """Join with the section that starts where this one ends."""
        return Section(
            self.up_station,
            next_section.down_station,
            self.distance + next_section.distance,
        )

    def _check_split_distance(self, section: "Section") -> None:
        if section.distance >= self.distance:
            raise InvalidDistance(
                f"Distance {section.distance} must be shorter than the "
                f"existing section ({self.distance})"
            )
