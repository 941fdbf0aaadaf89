"""Display formatting and explanatory messages for a classified trip."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable

from .entities import ClassificationResult
from .enums import Category, Relation
from .ranking import ModeCard


# ── Formatting ────────────────────────────────────────────────────────


def half_up(value: float) -> int:
    """Round to the nearest integer, halves upwards."""
    return math.floor(value + 0.5)


def fixed(value: float, places: int) -> str:
    """Fixed-point text with ties rounded away from zero.

    Works on the exact binary value of *value*, so 2.25 gives "2.3" while
    1.005 (stored just below) gives "1.00".
    """
    quantum = Decimal(1).scaleb(-places)
    return str(Decimal(value + 0.0).quantize(quantum, rounding=ROUND_HALF_UP))


def format_time(hours: float) -> str:
    if hours < 1:
        return f"{half_up(hours * 60)} min"
    return f"{fixed(hours, 1)} hours"


def format_cost(cost: float) -> str:
    return f"${fixed(cost, 2)}"


def format_distance(distance_km: float) -> str:
    return f"{half_up(distance_km)} km"


def format_co2(co2: float) -> str:
    return f"{fixed(co2, 2)} kg"


def trees_sentence(trees_needed: float) -> str:
    trees = fixed(trees_needed, 1)
    noun = "tree" if trees == "1.0" else "trees"
    return f"This journey requires {trees} {noun} to absorb the CO₂ over one year."


# ── Impact messages (one per category) ────────────────────────────────


def _perfect(c: ClassificationResult) -> str:
    return (
        "✅ Perfect choice! You've selected the best option for environmental "
        f"impact with {fixed(c.selected.co2, 2)} kg CO₂ emissions and "
        f"{fixed(c.selected.time, 1)} hours travel time."
    )


def _lowest_emission(c: ClassificationResult) -> str:
    if not c.long_journey:
        return (
            "✅ Excellent choice! You've selected the most eco-friendly option "
            "with the lowest CO₂ emissions and reasonable travel time."
        )
    msg = (
        f"✅ You've chosen the lowest emission option ({fixed(c.selected.co2, 2)} kg CO₂), "
        f"but this journey takes {fixed(c.selected.time, 1)} hours."
    )
    if c.best_mode.key != c.selected.key:
        best = c.best_mode
        msg += (
            f" Consider {best.mode.name} ({fixed(best.co2, 2)} kg CO₂, {fixed(best.time, 1)} hours)"
            " for a better balance of time and emissions."
        )
    return msg


def _worst(c: ClassificationResult) -> str:
    best = c.best_mode
    return (
        f"⚠️ This is the highest emission option ({fixed(c.selected.co2, 2)} kg CO₂). "
        f"Travel time: {fixed(c.selected.time, 1)} hours. You could reduce "
        f"{fixed(c.co2_excess, 2)} kg CO₂ by switching to {best.mode.name.lower()} "
        f"({fixed(best.time, 1)} hours)."
    )


def _tradeoff(c: ClassificationResult) -> str:
    best = c.best_mode
    higher = f" ({fixed(c.percent_more, 0)}% higher)" if c.percent_more is not None else ""
    direction = "faster" if c.is_faster_than_best else "slower"
    return (
        f"Your choice emits {fixed(c.co2_excess, 2)} kg more CO₂ than {best.mode.name}{higher}. "
        f"Travel time: {fixed(c.selected.time, 1)} hours vs {fixed(best.time, 1)} hours "
        f"({fixed(c.time_difference, 1)} hours {direction}). "
        "Consider if the time saved justifies the environmental cost."
    )


_IMPACT: dict[Category, Callable[[ClassificationResult], str]] = {
    Category.PERFECT: _perfect,
    Category.LOWEST_EMISSION: _lowest_emission,
    Category.WORST: _worst,
    Category.TRADEOFF: _tradeoff,
}


def impact_message(c: ClassificationResult) -> str:
    return f"{_IMPACT[c.category](c)} {trees_sentence(c.trees_needed)}"


def carbon_cost_message(c: ClassificationResult) -> str:
    cost = format_cost(c.selected_carbon_cost)
    best_name = c.best_mode.mode.name.lower()
    saving = format_cost(c.carbon_cost_saving)

    if c.category is Category.PERFECT:
        return (
            f"Your carbon cost: {cost}. "
            "You're making the most environmentally responsible choice!"
        )
    if c.category is Category.LOWEST_EMISSION:
        return (
            f"Your carbon footprint costs {cost} (carbon price). "
            "You're minimizing environmental impact!"
        )
    if c.category is Category.WORST:
        return (
            f"Your carbon cost: {cost}. Switching to {best_name} would save "
            f"{saving} in carbon costs and significantly reduce environmental harm."
        )
    return (
        f"Carbon cost: {cost}. Switching to {best_name} could save {saving} in "
        f"carbon costs with {fixed(c.best_mode.time, 1)} hours travel time. "
        "Balance speed with environmental responsibility!"
    )


# ── Mode cards ────────────────────────────────────────────────────────


def compare_text(card: ModeCard) -> str:
    if card.relation is None:
        return "Your selection"
    if card.relation is Relation.SAME:
        return "Same emissions"
    word = "less" if card.relation is Relation.LESS else "more"
    return f"{fixed(abs(card.co2_delta), 2)} kg {word} CO₂"
