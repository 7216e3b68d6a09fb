"""Objects that populate a star system: bases, planets, stars and jump points."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, Optional, Sequence

if TYPE_CHECKING:
    from spacesim.universe import System


def _vector(values: Sequence, length: int, kind: type, name: str) -> tuple:
    items = tuple(values)
    if len(items) != length:
        raise ValueError(f"{name} needs {length} components, got {len(items)}")
    return tuple(kind(item) for item in items)


@dataclass
class Mesh:
    """Placement of a renderable model."""

    location: tuple[float, float] = (0.0, 0.0)
    rotation: tuple[int, int] = (0, 0)
    scale: tuple[int, int] = (0, 0)

    def __post_init__(self) -> None:
        self.location = _vector(self.location, 2, float, "location")
        self.rotation = _vector(self.rotation, 2, int, "rotation")
        self.scale = _vector(self.scale, 2, int, "scale")


@dataclass
class Terrain:
    """Surface description of a planet."""


class BaseType(IntEnum):
    MINING = 0
    AGRICULTURAL = 1
    PIRATE = 2
    PLEASURE = 3
    REFINERY = 4
    NEW_DETROIT = 5
    NEW_CONSTANTINOPLE = 6
    PERRY = 7
    MILITARY = 8
    CIVILIAN = 9


@dataclass
class Base:
    """A space station or landing base."""

    name: str
    location: tuple[float, float, float] = (0.0, 0.0, 0.0)
    scale: tuple[int, int, int] = (0, 0, 0)
    base_type: BaseType = BaseType.CIVILIAN
    mesh: Optional[Mesh] = None

    def __post_init__(self) -> None:
        self.location = _vector(self.location, 3, float, "location")
        self.scale = _vector(self.scale, 3, int, "scale")
        self.base_type = BaseType(self.base_type)

    @property
    def has_mesh(self) -> bool:
        return self.mesh is not None


@dataclass
class JumpPoint:
    """A link from one system to another."""

    name: str
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    destination_system_name: str = ""
    destination_nav_point_name: str = ""
    destination_system: Optional["System"] = field(default=None, repr=False, compare=False)


@dataclass
class Planet:
    """A planet, optionally with landable terrain."""

    name: str
    location: tuple[float, float, float] = (0.0, 0.0, 0.0)
    scale: tuple[int, int, int] = (0, 0, 0)
    terrain: Optional[Terrain] = None

    def __post_init__(self) -> None:
        self.location = _vector(self.location, 3, float, "location")
        self.scale = _vector(self.scale, 3, int, "scale")

    @property
    def has_terrain(self) -> bool:
        return self.terrain is not None


class StarType(IntEnum):
    RED_GIANT = 0
    YELLOW_SUN = 1
    WHITE_DWARF = 2
    BLUE_SUN = 3
    BROWN_DWARF = 4
    PULSAR = 5
    QUASAR = 6


@dataclass
class Star:
    """A star in a system."""

    name: str
    location: tuple[float, float, float] = (0.0, 0.0, 0.0)
    scale: tuple[int, int, int] = (0, 0, 0)
    star_type: StarType = StarType.YELLOW_SUN

    def __post_init__(self) -> None:
        self.location = _vector(self.location, 3, float, "location")
        self.scale = _vector(self.scale, 3, int, "scale")
        self.star_type = StarType(self.star_type)


@dataclass
class Blackhole:
    """A black hole in a system."""

    name: str
    location: tuple[float, float, float] = (0.0, 0.0, 0.0)
    scale: tuple[int, int, int] = (0, 0, 0)

    def __post_init__(self) -> None:
        self.location = _vector(self.location, 3, float, "location")
        self.scale = _vector(self.scale, 3, int, "scale")