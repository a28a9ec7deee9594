"""Enumerations for the labels used by the aoe4world API.

Architecture:
    All enums are string enums so they serialize back to the exact label the
    API uses. Labels the server may extend over time (civilizations, maps,
    rank leagues) are open-ended: an unrecognized label becomes an "unknown"
    pseudo-member that keeps the raw string, so a new DLC civilization never
    breaks deserialization of a whole page.

Key Types:
    - Leaderboard: Leaderboard a game counts towards
    - GameKind: Kind of game being played
    - GameResult: Outcome of a game for one player
    - Civilization: Playable civilizations (open-ended)
    - Map / MapType: Maps and their land/water classification (open-ended)
    - League: Rank league and division, e.g. ``conqueror_3`` (open-ended)
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class _OpenEnum(str, Enum):
    """String enum that accepts labels it does not know yet."""

    @classmethod
    def _missing_(cls, value: Any) -> Any:
        if not isinstance(value, str):
            return None
        member = str.__new__(cls, value)
        member._name_ = "UNKNOWN"
        member._value_ = value
        return member

    @property
    def is_unknown(self) -> bool:
        """True if the label was not recognized by this version of the library."""
        return self._name_ == "UNKNOWN"

    def __str__(self) -> str:
        return self.value


class Leaderboard(str, Enum):
    """Which leaderboard a game was played on.

    Equivalent to :class:`GameKind` with the addition of the solo and team
    ranked ladders.
    """

    RM_SOLO = "rm_solo"
    RM_TEAM = "rm_team"
    RM_1V1 = "rm_1v1"
    RM_2V2 = "rm_2v2"
    RM_3V3 = "rm_3v3"
    RM_4V4 = "rm_4v4"
    QM_1V1 = "qm_1v1"
    QM_2V2 = "qm_2v2"
    QM_3V3 = "qm_3v3"
    QM_4V4 = "qm_4v4"
    CUSTOM = "custom"

    def __str__(self) -> str:
        return self.value


class GameKind(str, Enum):
    """Type of game being played."""

    RM_1V1 = "rm_1v1"
    RM_2V2 = "rm_2v2"
    RM_3V3 = "rm_3v3"
    RM_4V4 = "rm_4v4"
    QM_1V1 = "qm_1v1"
    QM_2V2 = "qm_2v2"
    QM_3V3 = "qm_3v3"
    QM_4V4 = "qm_4v4"
    CUSTOM = "custom"

    def __str__(self) -> str:
        return self.value


class GameResult(str, Enum):
    """The result of a match for one player.

    No-result outcomes are reported as ``unknown``.
    """

    WIN = "win"
    LOSS = "loss"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


class Civilization(_OpenEnum):
    """A civilization in AoE IV."""

    ENGLISH = "english"
    FRENCH = "french"
    HOLY_ROMAN_EMPIRE = "holy_roman_empire"
    RUS = "rus"
    MONGOLS = "mongols"
    CHINESE = "chinese"
    ABBASID_DYNASTY = "abbasid_dynasty"
    DELHI_SULTANATE = "delhi_sultanate"
    OTTOMANS = "ottomans"
    MALIANS = "malians"
    JAPANESE = "japanese"
    BYZANTINES = "byzantines"
    AYYUBIDS = "ayyubids"
    JEANNE_DARC = "jeanne_darc"
    ORDER_OF_THE_DRAGON = "order_of_the_dragon"
    ZHU_XIS_LEGACY = "zhu_xis_legacy"
    HOUSE_OF_LANCASTER = "house_of_lancaster"
    KNIGHTS_TEMPLAR = "knights_templar"
    GOLDEN_HORDE = "golden_horde"
    MACEDONIAN_DYNASTY = "macedonian_dynasty"
    SENGOKU_DAIMYO = "sengoku_daimyo"
    TUGHLAQ_DYNASTY = "tughlaq_dynasty"


class MapType(str, Enum):
    """Land/water classification of a map. Custom maps have none."""

    UNKNOWN = "unknown"
    LAND = "land"
    HYBRID = "hybrid"
    WATER = "water"

    def __str__(self) -> str:
        return self.value


class Map(_OpenEnum):
    """A map in AoE IV."""

    CRAFTED_MAP = "Crafted Map"
    ALTAI = "Altai"
    ANCIENT_SPIRES = "Ancient Spires"
    ARCHIPELAGO = "Archipelago"
    BLACK_FOREST = "Black Forest"
    BOULDER_BAY = "Boulder Bay"
    CONFLUENCE = "Confluence"
    DANUBE_RIVER = "Danube River"
    DRY_ARABIA = "Dry Arabia"
    FRENCH_PASS = "French Pass"
    HIGH_VIEW = "High View"
    HILL_AND_DALE = "Hill and Dale"
    KING_OF_THE_HILL = "King of the Hill"
    LIPANY = "Lipany"
    MONGOLIAN_HEIGHTS = "Mongolian Heights"
    MOUNTAIN_PASS = "Mountain Pass"
    NAGARI = "Nagari"
    WARRING_ISLANDS = "Warring Islands"
    MEGA_RANDOM = "MegaRandom"
    THE_PIT = "The Pit"
    OASIS = "Oasis"
    BALTIC = "Baltic"
    FOREST_PONDS = "Forest Ponds"
    WETLANDS = "Wetlands"
    PRAIRIE = "Prairie"
    WATERING_HOLES = "Watering Holes"
    HIDEOUT = "Hideout"
    MOUNTAIN_CLEARING = "Mountain Clearing"
    CONTINENTAL = "Continental"
    MARSHLAND = "Marshland"
    FOUR_LAKES = "Four Lakes"
    MIGRATION = "Migration"
    VOLCANIC_ISLAND = "Volcanic Island"
    GOLDEN_HEIGHTS = "Golden Heights"
    AFRICAN_WATERS = "African Waters"
    THICKETS = "Thickets"
    GOLDEN_PIT = "Golden Pit"
    CLIFFSIDE = "Cliffside"
    GORGE = "Gorge"
    CANAL = "Canal"
    GLADE = "Glade"
    HAYWIRE = "Haywire"
    TURTLE_RIDGE = "Turtle Ridge"
    ROCKY_RIVER = "Rocky River"
    HIMEYAMA = "Himeyama"
    FORTS = "Forts"
    HIDDEN_VALLEY = "Hidden Valley"

    @classmethod
    def _missing_(cls, value: Any) -> Any:
        # Baltic was called Mediterranean before its rework
        if value == "Mediterranean":
            return cls.BALTIC
        return super()._missing_(value)

    @property
    def map_type(self) -> MapType:
        """Land/hybrid/water classification of this map."""
        if self.is_unknown:
            return MapType.UNKNOWN
        return _MAP_TYPES.get(self, MapType.UNKNOWN)


_MAP_TYPES: dict[Map, MapType] = {
    Map.ALTAI: MapType.LAND,
    Map.ANCIENT_SPIRES: MapType.HYBRID,
    Map.ARCHIPELAGO: MapType.WATER,
    Map.BLACK_FOREST: MapType.HYBRID,
    Map.BOULDER_BAY: MapType.HYBRID,
    Map.CONFLUENCE: MapType.HYBRID,
    Map.DANUBE_RIVER: MapType.HYBRID,
    Map.DRY_ARABIA: MapType.LAND,
    Map.FRENCH_PASS: MapType.LAND,
    Map.HIGH_VIEW: MapType.LAND,
    Map.HILL_AND_DALE: MapType.LAND,
    Map.KING_OF_THE_HILL: MapType.LAND,
    Map.LIPANY: MapType.LAND,
    Map.MONGOLIAN_HEIGHTS: MapType.HYBRID,
    Map.MOUNTAIN_PASS: MapType.LAND,
    Map.NAGARI: MapType.HYBRID,
    Map.WARRING_ISLANDS: MapType.WATER,
    Map.MEGA_RANDOM: MapType.HYBRID,
    Map.THE_PIT: MapType.LAND,
    Map.OASIS: MapType.HYBRID,
    Map.BALTIC: MapType.HYBRID,
    Map.FOREST_PONDS: MapType.HYBRID,
    Map.WETLANDS: MapType.HYBRID,
    Map.PRAIRIE: MapType.LAND,
    Map.WATERING_HOLES: MapType.HYBRID,
    Map.HIDEOUT: MapType.LAND,
    Map.MOUNTAIN_CLEARING: MapType.LAND,
    Map.CONTINENTAL: MapType.HYBRID,
    Map.MARSHLAND: MapType.LAND,
    Map.FOUR_LAKES: MapType.HYBRID,
    Map.MIGRATION: MapType.WATER,
    Map.VOLCANIC_ISLAND: MapType.HYBRID,
    Map.GOLDEN_HEIGHTS: MapType.HYBRID,
    Map.AFRICAN_WATERS: MapType.HYBRID,
    Map.THICKETS: MapType.HYBRID,
    Map.GOLDEN_PIT: MapType.LAND,
    Map.CLIFFSIDE: MapType.LAND,
    Map.GORGE: MapType.LAND,
    Map.CANAL: MapType.HYBRID,
    Map.GLADE: MapType.LAND,
    Map.HAYWIRE: MapType.LAND,
    Map.TURTLE_RIDGE: MapType.LAND,
    Map.ROCKY_RIVER: MapType.HYBRID,
    Map.HIMEYAMA: MapType.LAND,
    Map.FORTS: MapType.HYBRID,
    Map.HIDDEN_VALLEY: MapType.LAND,
}


class League(_OpenEnum):
    """A player's rank league and division (e.g. Conqueror III)."""

    UNRANKED = "unranked"
    BRONZE_1 = "bronze_1"
    BRONZE_2 = "bronze_2"
    BRONZE_3 = "bronze_3"
    SILVER_1 = "silver_1"
    SILVER_2 = "silver_2"
    SILVER_3 = "silver_3"
    GOLD_1 = "gold_1"
    GOLD_2 = "gold_2"
    GOLD_3 = "gold_3"
    PLATINUM_1 = "platinum_1"
    PLATINUM_2 = "platinum_2"
    PLATINUM_3 = "platinum_3"
    DIAMOND_1 = "diamond_1"
    DIAMOND_2 = "diamond_2"
    DIAMOND_3 = "diamond_3"
    CONQUEROR_1 = "conqueror_1"
    CONQUEROR_2 = "conqueror_2"
    CONQUEROR_3 = "conqueror_3"

    @classmethod
    def _missing_(cls, value: Any) -> Any:
        if value == "":
            return cls.UNRANKED
        return super()._missing_(value)

    @property
    def tier(self) -> str | None:
        """League name without the division, e.g. ``"conqueror"``."""
        if self is League.UNRANKED or self.is_unknown:
            return None
        return self.value.split("_", 1)[0]

    @property
    def division(self) -> int | None:
        """Division within the league, 1 (lowest) to 3 (highest)."""
        if self is League.UNRANKED or self.is_unknown:
            return None
        return int(self.value.rsplit("_", 1)[1])
