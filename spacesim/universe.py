"""The galaxy hierarchy: sectors, quadrants, systems and nav points."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Iterator, Optional, TextIO

from spacesim.factions import Faction
from spacesim.space import Base, Planet, Star


@dataclass
class NavPoint:
    """A named navigation point inside a system."""

    name: str
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class System:
    """A star system and everything in it."""

    name: str
    faction: Faction = Faction.UNKNOWN
    nav_points: list[NavPoint] = field(default_factory=list)
    planets: list[Planet] = field(default_factory=list)
    bases: list[Base] = field(default_factory=list)
    stars: list[Star] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.faction = Faction(self.faction)


@dataclass
class Quadrant:
    """A group of star systems."""

    name: str
    systems: list[System] = field(default_factory=list)


def _default_quadrants() -> list[Quadrant]:
    return [Quadrant("") for _ in range(3)]


@dataclass
class Sector:
    """A region of space split into quadrants."""

    name: str
    quadrants: list[Quadrant] = field(default_factory=_default_quadrants)


@dataclass
class Universe:
    """All known sectors."""

    sectors: list[Sector] = field(default_factory=list)

    def add_sector(self, sector: Sector) -> None:
        self.sectors.append(sector)

    def find_sector(self, name: str) -> Optional[Sector]:
        """Return the first sector with this name, or None."""
        return next((s for s in self.sectors if s.name == name), None)

    def hierarchy_lines(self) -> Iterator[str]:
        """Yield an indented outline of sectors, quadrants and systems."""
        for sector in self.sectors:
            yield f"Sector: {sector.name}"
            for quadrant in sector.quadrants:
                yield f"  Quadrant: {quadrant.name}"
                for system in quadrant.systems:
                    yield f"    System: {system.name}"

    def print_hierarchy(self, file: Optional[TextIO] = None) -> None:
        out = sys.stdout if file is None else file
        for line in self.hierarchy_lines():
            print(line, file=out)