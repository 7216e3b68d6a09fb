"""Political factions that systems can belong to."""

from enum import IntEnum


class Faction(IntEnum):
    """A faction controlling a star system."""

    CONFEDERATION = 0
    KILRATHI = 1
    KILRATHI_DEFECTORS = 2
    LANDREICH = 3
    STELTEK = 4
    FIRREKKANS = 5
    RETROS = 6
    PIRATES = 7
    MERCHANTS = 8
    MERCENARIES = 9
    MANDARINS = 10
    PRIVATEERS = 11
    BORDER_WORLDS = 12
    UNKNOWN = 13