"""Domain enumerations."""

import enum


class Category(str, enum.Enum):
    """Where the selected mode sits relative to the best / worst options."""

    PERFECT = "PERFECT"
    LOWEST_EMISSION = "LOWEST_EMISSION"
    WORST = "WORST"
    TRADEOFF = "TRADEOFF"


class SortKey(str, enum.Enum):
    EMISSION = "emission"
    TIME = "time"
    COST = "cost"


class Badge(str, enum.Enum):
    SELECTED = "SELECTED"
    BEST = "BEST"
    WORST = "WORST"


class Relation(str, enum.Enum):
    """Emission relation of a mode card against the selected mode."""

    LESS = "LESS"
    MORE = "MORE"
    SAME = "SAME"
