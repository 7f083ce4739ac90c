"""Error taxonomy for the subway network."""


class SubwayException(Exception):
    """Base error carrying a machine-readable code."""

    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class InvalidSourceTarget(SubwayException):
    def __init__(self, message: str = "Source and target stations must differ"):
        super().__init__(message, code="INVALID_SOURCE_TARGET")


class PathNotFound(SubwayException):
    def __init__(self, message: str = "No path connects the given stations"):
        super().__init__(message, code="PATH_NOT_FOUND")


class SectionAlreadyRegistered(SubwayException):
    def __init__(self, message: str = "Both stations are already registered on the line"):
        super().__init__(message, code="SECTION_ALREADY_REGISTERED")


class SectionNotSearched(SubwayException):
    def __init__(self, message: str = "Station is not registered on the line"):
        super().__init__(message, code="SECTION_NOT_SEARCHED")


class InvalidDistance(SubwayException):
    def __init__(self, message: str = "Invalid section distance"):
        super().__init__(message, code="INVALID_DISTANCE")


class EmptyLine(SubwayException):
    def __init__(self, message: str = "A line must keep at least one section"):
        super().__init__(message, code="EMPTY_LINE")


class SameStationSection(SubwayException):
    def __init__(self, message: str = "Up and down stations must differ"):
        super().__init__(message, code="SAME_STATION_SECTION")


class StationNotFound(SubwayException):
    def __init__(self, message: str = "Station not found"):
        super().__init__(message, code="STATION_NOT_FOUND")


class LineNotFound(SubwayException):
    def __init__(self, message: str = "Line not found"):
        super().__init__(message, code="LINE_NOT_FOUND")


class DuplicateLineName(SubwayException):
    def __init__(self, message: str = "A line with this name already exists"):
        super().__init__(message, code="DUPLICATE_LINE_NAME")


class DuplicateStationName(SubwayException):
    def __init__(self, message: str = "A station with this name already exists"):
        super().__init__(message, code="DUPLICATE_STATION_NAME")
