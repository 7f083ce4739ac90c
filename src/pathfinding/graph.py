"""Subway graph construction from line sections."""

from collections.abc import Iterable

import networkx as nx

from src.line import Line
from src.station import Station


class SubwayGraph:
    """
    Weighted multigraph of the subway network.

    Nodes are stations, edges are sections. Sections are stored undirected
    (trains run both ways) and keyed by line id, so two lines serving the
    same pair of stations contribute two parallel edges. Lines not yet saved
    (id None) get a key assigned by networkx.
    """

    def __init__(self):
        """Initialize empty graph."""
        self.graph = nx.MultiGraph()

    @classmethod
    def from_lines(cls, lines: Iterable[Line]) -> "SubwayGraph":
        graph = cls()
        for line in lines:
            graph.add_line(line)
        return graph

    def add_line(self, line: Line) -> None:
        """Add every section of a line as an edge weighted by its distance."""
        for section in line.get_sections():
            self.graph.add_node(section.up_station)
            self.graph.add_node(section.down_station)
            self.graph.add_edge(
                section.up_station,
                section.down_station,
                key=line.id,
                weight=section.distance,
                line=line.name,
            )

    def get_stations(self) -> list[Station]:
        """Get list of all stations served by at least one section."""
        return list(self.graph.nodes())

    def has_station(self, station: Station) -> bool:
        return station in self.graph

    def get_neighbors(self, station: Station) -> list[Station]:
        if station not in self.graph:
            return []
        return list(self.graph.neighbors(station))

    def get_edge(self, station1: Station, station2: Station) -> dict | None:
        """Get the lightest of the parallel edges between two stations."""
        if not self.graph.has_edge(station1, station2):
            return None
        edges = self.graph[station1][station2].values()
        return dict(min(edges, key=lambda data: data["weight"]))

    def get_edge_weight(self, station1: Station, station2: Station) -> int | None:
        edge = self.get_edge(station1, station2)
        return edge["weight"] if edge else None

    def __len__(self) -> int:
        """Return number of stations."""
        return len(self.graph)
