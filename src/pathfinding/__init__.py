"""Pathfinding module for finding subway routes."""

from .dijkstra import Path, PathFinder, PathSegment
from .graph import SubwayGraph
from .service import PathService

__all__ = ["Path", "PathFinder", "PathSegment", "PathService", "SubwayGraph"]
