"""Film and series value types"""
from dataclasses import dataclass

from uocflix_catalog_service.models.genre import Genre


@dataclass(frozen=True)
class Series:
    """A series groups films and carries their genre."""
    name: str
    genre: Genre

    def __repr__(self) -> str:
        return f"<Series(name='{self.name}', genre={self.genre.name})>"


@dataclass(frozen=True)
class Film:
    """A film belonging to a series. Duration is in minutes."""
    name: str
    duration: int
    series: Series

    @property
    def genre(self) -> Genre:
        return self.series.genre

    def __repr__(self) -> str:
        return f"<Film(name='{self.name}', duration={self.duration})>"
