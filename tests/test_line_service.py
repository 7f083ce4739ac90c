"""Tests for line use cases resolved by id."""

import pytest

from src.exceptions import (
    DuplicateLineName,
    EmptyLine,
    InvalidDistance,
    LineNotFound,
    SectionAlreadyRegistered,
    SectionNotSearched,
    StationNotFound,
)
from src.line import LineRepository, LineService
from src.station import StationRepository, StationService


class TestLineService:
    @pytest.fixture
    def station_service(self):
        return StationService(StationRepository())

    @pytest.fixture
    def stations(self, station_service):
        names = ["교대역", "강남역", "역삼역", "선릉역", "삼성역"]
        return {name: station_service.create_station(name) for name in names}

    @pytest.fixture
    def line_service(self, station_service):
        return LineService(LineRepository(), station_service)

    @pytest.fixture
    def line(self, line_service, stations):
        return line_service.create_line(
            "2호선", "green", stations["강남역"].id, stations["역삼역"].id, 10
        )

    def test_create_line(self, line, stations):
        assert line.id == 1
        assert line.get_stations() == [stations["강남역"], stations["역삼역"]]

    def test_create_duplicate_line(self, line_service, line, stations):
        with pytest.raises(DuplicateLineName):
            line_service.create_line(
                "2호선", "red", stations["교대역"].id, stations["강남역"].id, 3
            )

    def test_create_line_unknown_station(self, line_service, stations):
        with pytest.raises(StationNotFound):
            line_service.create_line("3호선", "orange", stations["교대역"].id, 99, 3)

    def test_add_section(self, line_service, line, stations):
        expected_size = line.size() + 1

        line_service.add_section(line.id, stations["역삼역"].id, stations["삼성역"].id, 1)

        found = line_service.find_line_by_id(line.id)
        assert found.size() == expected_size
        assert found.get_stations() == [
            stations["강남역"], stations["역삼역"], stations["삼성역"]
        ]

    def test_add_section_first_up_station(self, line_service, line, stations):
        line_service.add_section(line.id, stations["교대역"].id, stations["강남역"].id, 1)

        found = line_service.find_line_by_id(line.id)
        assert found.get_stations() == [
            stations["교대역"], stations["강남역"], stations["역삼역"]
        ]

    def test_add_section_middle(self, line_service, line, stations):
        line_service.add_section(line.id, stations["강남역"].id, stations["선릉역"].id, 1)
        line_service.add_section(line.id, stations["삼성역"].id, stations["역삼역"].id, 1)

        found = line_service.find_line_by_id(line.id)
        assert found.size() == 3
        assert found.get_stations() == [
            stations["강남역"], stations["선릉역"], stations["삼성역"], stations["역삼역"]
        ]

    @pytest.mark.parametrize("distance", [10, 11, 100])
    def test_add_section_middle_invalid_distance(self, line_service, line, stations, distance):
        with pytest.raises(InvalidDistance):
            line_service.add_section(
                line.id, stations["선릉역"].id, stations["역삼역"].id, distance
            )

    def test_add_section_already_registered(self, line_service, line, stations):
        with pytest.raises(SectionAlreadyRegistered):
            line_service.add_section(line.id, stations["강남역"].id, stations["역삼역"].id, 1)
        with pytest.raises(SectionAlreadyRegistered):
            line_service.add_section(line.id, stations["역삼역"].id, stations["강남역"].id, 1)

    def test_add_section_not_searched(self, line_service, line, stations):
        with pytest.raises(SectionNotSearched):
            line_service.add_section(line.id, stations["교대역"].id, stations["삼성역"].id, 1)

    def test_add_section_unknown_line(self, line_service, stations):
        with pytest.raises(LineNotFound):
            line_service.add_section(42, stations["교대역"].id, stations["삼성역"].id, 1)

    def test_remove_section_merges(self, line_service, line, stations):
        line_service.add_section(line.id, stations["역삼역"].id, stations["삼성역"].id, 3)
        line_service.add_section(line.id, stations["교대역"].id, stations["강남역"].id, 1)
        line_service.add_section(line.id, stations["선릉역"].id, stations["삼성역"].id, 1)
        expected_size = line.size() - 1

        line_service.remove_section(line.id, stations["선릉역"].id)

        found = line_service.find_line_by_id(line.id)
        assert found.size() == expected_size
        assert found.get_sections()[-1].distance == 3
        assert found.get_stations() == [
            stations["교대역"], stations["강남역"], stations["역삼역"], stations["삼성역"]
        ]

    def test_remove_section_empty_line(self, line_service, line, stations):
        with pytest.raises(EmptyLine):
            line_service.remove_section(line.id, stations["삼성역"].id)

    def test_remove_section_not_searched(self, line_service, line, stations):
        line_service.add_section(line.id, stations["역삼역"].id, stations["선릉역"].id, 1)

        with pytest.raises(SectionNotSearched):
            line_service.remove_section(line.id, stations["교대역"].id)

    def test_update_and_delete_line(self, line_service, line):
        updated = line_service.update_line(line.id, "신분당선", "red")
        assert (updated.name, updated.color) == ("신분당선", "red")

        line_service.delete_line(line.id)
        assert line_service.find_all_lines() == []
        with pytest.raises(LineNotFound):
            line_service.find_line_by_id(line.id)
