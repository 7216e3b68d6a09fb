"""Trade commodities carried between bases."""

from enum import IntEnum


class Cargo(IntEnum):
    """A kind of cargo that can be bought, sold or hauled."""

    GRAIN = 0
    GENERIC_FOODS = 1
    LUXURY_FOODS = 2
    FURS = 3
    LIQUOR = 4
    PETS = 5
    WOOD = 6
    GEMS = 7
    IRON = 8
    TUNGSTEN = 9
    PLUTONIUM = 10
    URANIUM = 11
    ARTWORK = 12
    GAMES = 13
    MOVIES = 14
    ADVANCED_FUELS = 15
    COMMUNICATIONS = 16
    COMPUTERS = 17
    CONSTRUCTION = 18
    FACTORY_EQUIPMENT = 19
    FOOD_DISPENSERS = 20
    HOLOGRAPHICS = 21
    HOME_APPLIANCES = 22
    HOME_ENTERTAINMENT = 23
    MEDICAL_EQUIPMENT = 24
    MINING_EQUIPMENT = 25
    PLASTICS = 26
    PRE_FABS = 27
    ROBOT_SERVANTS = 28
    ROBOT_WORKERS = 29
    SOFTWARE = 30
    SPACE_SALVAGE = 31
    TEXTILES = 32
    WEAPONRY = 33
    BOOKS = 34
    PLAYTHING = 35
    BRILLIANCE = 36
    SLAVES = 37
    TOBACCO = 38
    ULTIMATE = 39
    DATA_RECORDER = 40