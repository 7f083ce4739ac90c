"""Tests for the command line entry point."""

from pathlib import Path

from src.main import main

DATA_DIR = Path(__file__).parent.parent / "data"
NETWORK_ARGS = [
    "--stations", str(DATA_DIR / "stations.csv"),
    "--sections", str(DATA_DIR / "sections.csv"),
]


class TestMain:
    def test_path(self, capsys):
        assert main(NETWORK_ARGS + ["path", "교대역", "양재역"]) == 0
        assert capsys.readouterr().out.strip() == "교대역→남부터미널역→양재역 (8 km)"

    def test_path_verbose(self, capsys):
        assert main(NETWORK_ARGS + ["path", "역삼역", "양재역", "-v"]) == 0
        out = capsys.readouterr().out
        assert out.splitlines()[0] == "역삼역→강남역→양재역 (14 km)"
        assert "[신분당선]" in out

    def test_unknown_station(self, capsys):
        assert main(NETWORK_ARGS + ["path", "교대역", "서울역"]) == 1
        assert "Unknown station: 서울역" in capsys.readouterr().err

    def test_same_station(self, capsys):
        assert main(NETWORK_ARGS + ["path", "교대역", "교대역"]) == 1
        assert "INVALID_SOURCE_TARGET" in capsys.readouterr().err

    def test_lines(self, capsys):
        assert main(NETWORK_ARGS + ["lines"]) == 0
        out = capsys.readouterr().out
        assert "2호선 (bg-green-600, 31 km): 교대역→강남역→역삼역→선릉역→삼성역" in out

    def test_missing_sections_file(self, tmp_path, capsys):
        assert main(["--sections", str(tmp_path / "none.csv"), "lines"]) == 1
        assert "Sections file not found" in capsys.readouterr().err
