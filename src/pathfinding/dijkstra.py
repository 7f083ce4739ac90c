"""Dijkstra shortest paths across all subway lines."""

import logging
from dataclasses import dataclass, field

import networkx as nx

from src.exceptions import InvalidSourceTarget, PathNotFound
from src.line import LineRepository
from src.station import Station

from .graph import SubwayGraph

logger = logging.getLogger(__name__)


@dataclass
class PathSegment:
    """One hop of a path and the line that serves it."""

    up_station: Station
    down_station: Station
    distance: int
    line: str


@dataclass
class Path:
    """Result of a shortest path query."""

    stations: list[Station]
    distance: int
    segments: list[PathSegment] = field(default_factory=list)


class PathFinder:
    """
    Find minimum-distance paths in the subway network.

    The graph is rebuilt from the line repository on every query, so results
    always reflect the current sections of every line.
    """

    def __init__(self, line_repository: LineRepository):
        self.line_repository = line_repository

    def build_graph(self) -> SubwayGraph:
        return SubwayGraph.from_lines(self.line_repository.find_all())

    def find_path(self, source: Station, target: Station) -> Path:
        """
        Find the shortest path between two stations.

        Raises:
            InvalidSourceTarget: source and target are the same station
            PathNotFound: no sections connect the two stations
        """
        if source == target:
            raise InvalidSourceTarget(f"Source and target are both {source.name}")

        graph = self.build_graph()
        try:
            distance, stations = nx.single_source_dijkstra(
                graph.graph, source, target, weight="weight"
            )
        except (nx.NetworkXNoPath, nx.NodeNotFound):
            logger.info("No path from %s to %s", source.name, target.name)
            raise PathNotFound(
                f"No path from {source.name} to {target.name}"
            ) from None

        segments = []
        for up_station, down_station in zip(stations, stations[1:]):
            edge = graph.get_edge(up_station, down_station)
            segments.append(PathSegment(
                up_station=up_station,
                down_station=down_station,
                distance=edge["weight"],
                line=edge["line"],
            ))

        return Path(stations=stations, distance=distance, segments=segments)
