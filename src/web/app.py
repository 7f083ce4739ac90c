"""
FastAPI web interface for the subway network.

Stations, lines and their sections, and shortest path queries.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from src.config import settings
from src.exceptions import SubwayException
from src.line import Line, LineRepository, LineService, load_sections
from src.pathfinding import Path, PathFinder, PathService
from src.station import Station, StationRepository, StationService, load_stations

logger = logging.getLogger(__name__)

# Error code -> HTTP status
STATUS_CODES = {
    "INVALID_SOURCE_TARGET": 400,
    "PATH_NOT_FOUND": 404,
    "SECTION_ALREADY_REGISTERED": 409,
    "SECTION_NOT_SEARCHED": 404,
    "INVALID_DISTANCE": 400,
    "EMPTY_LINE": 409,
    "SAME_STATION_SECTION": 400,
    "STATION_NOT_FOUND": 404,
    "LINE_NOT_FOUND": 404,
    "DUPLICATE_LINE_NAME": 409,
    "DUPLICATE_STATION_NAME": 409,
}


class StationRequest(BaseModel):
    name: str


class StationResponse(BaseModel):
    id: int
    name: str

    @classmethod
    def of(cls, station: Station) -> "StationResponse":
        return cls(id=station.id, name=station.name)


class LineRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    color: str
    up_station_id: int = Field(alias="upStationId")
    down_station_id: int = Field(alias="downStationId")
    distance: int


class LineUpdateRequest(BaseModel):
    name: str
    color: str


class SectionRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    up_station_id: int = Field(alias="upStationId")
    down_station_id: int = Field(alias="downStationId")
    distance: int


class LineResponse(BaseModel):
    id: int
    name: str
    color: str
    distance: int
    stations: list[StationResponse]

    @classmethod
    def of(cls, line: Line) -> "LineResponse":
        return cls(
            id=line.id,
            name=line.name,
            color=line.color,
            distance=line.distance(),
            stations=[StationResponse.of(s) for s in line.get_stations()],
        )


class SegmentResponse(BaseModel):
    up_station: StationResponse
    down_station: StationResponse
    distance: int
    line: str


class PathResponse(BaseModel):
    stations: list[StationResponse]
    distance: int
    segments: list[SegmentResponse]

    @classmethod
    def of(cls, path: Path) -> "PathResponse":
        return cls(
            stations=[StationResponse.of(s) for s in path.stations],
            distance=path.distance,
            segments=[
                SegmentResponse(
                    up_station=StationResponse.of(seg.up_station),
                    down_station=StationResponse.of(seg.down_station),
                    distance=seg.distance,
                    line=seg.line,
                )
                for seg in path.segments
            ],
        )


class ErrorResponse(BaseModel):
    code: str
    message: str


def load_network(app: FastAPI) -> None:
    """Load stations and sections from the configured CSV files, if present."""
    if settings.STATIONS_FILE.exists():
        count = load_stations(app.state.station_repository, settings.STATIONS_FILE)
        logger.info("Loaded %d stations from %s", count, settings.STATIONS_FILE)
    if settings.SECTIONS_FILE.exists():
        count = load_sections(
            app.state.line_repository,
            app.state.station_repository,
            settings.SECTIONS_FILE,
        )
        logger.info("Loaded %d sections from %s", count, settings.SECTIONS_FILE)


def create_app(preload: bool = True) -> FastAPI:
    """
    Build the application with fresh in-memory repositories.

    Args:
        preload: Load the CSV network on startup
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if preload:
            load_network(app)
        yield

    app = FastAPI(
        title=settings.APP_TITLE,
        description="Subway lines and shortest paths",
        version=settings.VERSION,
        lifespan=lifespan,
    )

    station_repository = StationRepository()
    line_repository = LineRepository()
    station_service = StationService(station_repository)
    app.state.station_repository = station_repository
    app.state.line_repository = line_repository
    app.state.station_service = station_service
    app.state.line_service = LineService(line_repository, station_service)
    app.state.path_service = PathService(PathFinder(line_repository), station_service)

    app.add_exception_handler(SubwayException, subway_exception_handler)
    register_routes(app)
    return app


async def subway_exception_handler(request: Request, exc: SubwayException) -> JSONResponse:
    status_code = STATUS_CODES.get(exc.code, 500)
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(code=exc.code, message=exc.message).model_dump(),
    )


def get_station_service(request: Request) -> StationService:
    return request.app.state.station_service


def get_line_service(request: Request) -> LineService:
    return request.app.state.line_service


def get_path_service(request: Request) -> PathService:
    return request.app.state.path_service


def register_routes(app: FastAPI) -> None:
    @app.post("/stations", response_model=StationResponse, status_code=201)
    def create_station(
        body: StationRequest,
        service: StationService = Depends(get_station_service),
    ) -> StationResponse:
        return StationResponse.of(service.create_station(body.name))

    @app.get("/stations", response_model=list[StationResponse])
    def list_stations(
        service: StationService = Depends(get_station_service),
    ) -> list[StationResponse]:
        return [StationResponse.of(s) for s in service.find_all_stations()]

    @app.delete("/stations/{station_id}", status_code=204)
    def delete_station(
        station_id: int,
        service: StationService = Depends(get_station_service),
    ) -> None:
        service.delete_station(station_id)

    @app.post("/lines", response_model=LineResponse, status_code=201)
    def create_line(
        body: LineRequest,
        service: LineService = Depends(get_line_service),
    ) -> LineResponse:
        line = service.create_line(
            body.name,
            body.color,
            body.up_station_id,
            body.down_station_id,
            body.distance,
        )
        return LineResponse.of(line)

    @app.get("/lines", response_model=list[LineResponse])
    def list_lines(service: LineService = Depends(get_line_service)) -> list[LineResponse]:
        return [LineResponse.of(line) for line in service.find_all_lines()]

    @app.get("/lines/{line_id}", response_model=LineResponse)
    def show_line(
        line_id: int,
        service: LineService = Depends(get_line_service),
    ) -> LineResponse:
        return LineResponse.of(service.find_line_by_id(line_id))

    @app.put("/lines/{line_id}", response_model=LineResponse)
    def update_line(
        line_id: int,
        body: LineUpdateRequest,
        service: LineService = Depends(get_line_service),
    ) -> LineResponse:
        return LineResponse.of(service.update_line(line_id, body.name, body.color))

    @app.delete("/lines/{line_id}", status_code=204)
    def delete_line(
        line_id: int,
        service: LineService = Depends(get_line_service),
    ) -> None:
        service.delete_line(line_id)

    @app.post("/lines/{line_id}/sections", response_model=LineResponse)
    def add_section(
        line_id: int,
        body: SectionRequest,
        service: LineService = Depends(get_line_service),
    ) -> LineResponse:
        line = service.add_section(
            line_id, body.up_station_id, body.down_station_id, body.distance
        )
        return LineResponse.of(line)

    @app.delete("/lines/{line_id}/sections", response_model=LineResponse)
    def remove_section(
        line_id: int,
        station_id: int = Query(alias="stationId"),
        service: LineService = Depends(get_line_service),
    ) -> LineResponse:
        return LineResponse.of(service.remove_section(line_id, station_id))

    @app.get("/paths", response_model=PathResponse)
    def find_path(
        source: int,
        target: int,
        service: PathService = Depends(get_path_service),
    ) -> PathResponse:
        return PathResponse.of(service.find_path(source, target))

    @app.get("/health")
    def health(request: Request):
        """Health check endpoint."""
        return {
            "status": "ok",
            "stations": len(request.app.state.station_repository),
            "lines": len(request.app.state.line_repository),
        }


logging.basicConfig(level=settings.LOG_LEVEL, format=settings.LOG_FORMAT)

app = create_app()
