"""Line: a named, coloured chain of sections."""

from dataclasses import dataclass, field

from src.station import Station

from .section import Section
from .sections import Sections


@dataclass
class Line:
    """A subway line. Always holds at least one section."""

    name: str
    color: str
    sections: Sections = field(repr=False)
    id: int | None = None

    @classmethod
    def create(
        cls,
        name: str,
        color: str,
        up_station: Station,
        down_station: Station,
        distance: int,
    ) -> "Line":
        return cls(
            name=name,
            color=color,
            sections=Sections([Section(up_station, down_station, distance)]),
        )

    def add_section(self, up_station: Station, down_station: Station, distance: int) -> None:
        self.sections.add(Section(up_station, down_station, distance))

    def remove_section(self, station: Station) -> None:
        self.sections.remove(station)

    def update(self, name: str, color: str) -> None:
        self.name = name
        self.color = color

    def get_sections(self) -> list[Section]:
        return self.sections.to_list()

    def get_stations(self) -> list[Station]:
        return self.sections.stations()

    def distance(self) -> int:
        return self.sections.distance()

    def size(self) -> int:
        return len(self.sections)
