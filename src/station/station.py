"""Station entity."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Station:
    """
    A subway station.

    Stations are compared and hashed by id only, so the same station can be
    shared by reference across sections of different lines.
    """

    id: int
    name: str = field(compare=False)

    def __str__(self) -> str:
        return self.name
