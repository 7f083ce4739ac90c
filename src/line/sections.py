"""Ordered chain of sections making up one line."""

from src.exceptions import EmptyLine, SectionAlreadyRegistered, SectionNotSearched
from src.station import Station

from .section import Section


class Sections:
    """
    The ordered, unbranching chain of sections of a line.

    Sections are kept in travel order, so that
    ``sections[i].down_station == sections[i + 1].up_station`` always holds.
    Every operation validates before it mutates: the replacement list is
    built first and swapped in only when the operation succeeds.
    """

    def __init__(self, sections: list[Section]):
        if not sections:
            raise EmptyLine("A line starts with at least one section")
        self._sections: list[Section] = list(sections)

    def add(self, section: Section) -> None:
        """
        Attach a section to the chain.

        Prepends when it ends at the first station, appends when it starts at
        the last station, and otherwise splits the section it overlaps.

        Raises:
            SectionAlreadyRegistered: both stations are already on the line
            SectionNotSearched: neither station is on the line
            InvalidDistance: a split would leave a non-positive remainder
        """
        stations = self.stations()
        has_up = section.up_station in stations
        has_down = section.down_station in stations

        if has_up and has_down:
            raise SectionAlreadyRegistered(
                f"{section.up_station.name} and {section.down_station.name} "
                "are already registered"
            )
        if not has_up and not has_down:
            raise SectionNotSearched(
                f"Neither {section.up_station.name} nor "
                f"{section.down_station.name} is on the line"
            )

        sections = list(self._sections)
        if section.down_station == stations[0]:
            sections.insert(0, section)
        elif section.up_station == stations[-1]:
            sections.append(section)
        elif has_up:
            index = self._index_of_up(section.up_station)
            sections[index:index + 1] = sections[index].split_down(section)
        else:
            index = self._index_of_down(section.down_station)
            sections[index:index + 1] = sections[index].split_up(section)
        self._sections = sections

    def remove(self, station: Station) -> None:
        """
        Detach a station from the chain.

        An end station drops its end section; an interior station merges its
        two neighbouring sections into one with the summed distance.

        Raises:
            EmptyLine: the chain has a single section left
            SectionNotSearched: the station is not on the line
        """
        if len(self._sections) <= 1:
            raise EmptyLine()

        stations = self.stations()
        if station not in stations:
            raise SectionNotSearched(f"{station.name} is not on the line")

        sections = list(self._sections)
        if station == stations[0]:
            del sections[0]
        elif station == stations[-1]:
            del sections[-1]
        else:
            index = self._index_of_down(station)
            sections[index:index + 2] = [sections[index].merge(sections[index + 1])]
        self._sections = sections

    def stations(self) -> list[Station]:
        """Stations in travel order, each listed once."""
        return [self._sections[0].up_station] + [
            section.down_station for section in self._sections
        ]

    def distance(self) -> int:
        """Total length of the chain."""
        return sum(section.distance for section in self._sections)

    def to_list(self) -> list[Section]:
        return list(self._sections)

    def _index_of_up(self, station: Station) -> int:
        for index, section in enumerate(self._sections):
            if section.up_station == station:
                return index
        raise SectionNotSearched(f"No section starts at {station.name}")

    def _index_of_down(self, station: Station) -> int:
        for index, section in enumerate(self._sections):
            if section.down_station == station:
                return index
        raise SectionNotSearched(f"No section ends at {station.name}")

    def __len__(self) -> int:
        return len(self._sections)
