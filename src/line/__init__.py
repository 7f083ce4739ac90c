"""Lines and their section chains."""

from .line import Line
from .repository import LineRepository, load_sections
from .section import Section
from .sections import Sections
from .service import LineService

__all__ = [
    "Line",
    "LineRepository",
    "LineService",
    "Section",
    "Sections",
    "load_sections",
]
