"""
Sorting and comparison cards for the mode listing.

The card for each mode carries a badge (priority SELECTED > BEST > WORST,
where best / worst are the ends of the current sort order), its CO2
delta against the selected mode, and bar widths relative to the largest
value of each metric.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from .entities import ModeResult, UnknownModeError
from .enums import Badge, Relation, SortKey

SORT_KEYS: dict[SortKey, Callable[[ModeResult], float]] = {
    SortKey.EMISSION: lambda r: r.co2,
    SortKey.TIME: lambda r: r.time,
    SortKey.COST: lambda r: r.cost,
}


@dataclass(frozen=True)
class ModeCard:
    result: ModeResult
    position: int
    badge: Optional[Badge]
    is_selected: bool
    co2_delta: float  # this mode minus the selected mode
    relation: Optional[Relation]  # None for the selected card itself
    co2_percent: float
    time_percent: float
    cost_percent: float


def sort_results(
    results: Sequence[ModeResult], by: SortKey = SortKey.EMISSION
) -> list[ModeResult]:
    return sorted(results, key=SORT_KEYS[by])


def bar_percentage(value: float, max_value: float) -> float:
    if max_value == 0:
        return 0.0 if value == 0 else 100.0
    return min(100.0, value / max_value * 100)


def _badge(position: int, last: int, is_selected: bool) -> Optional[Badge]:
    if is_selected:
        return Badge.SELECTED
    if position == 0:
        return Badge.BEST
    if position == last:
        return Badge.WORST
    return None


def _relation(result: ModeResult, selected: ModeResult) -> Relation:
    if result.co2 < selected.co2:
        return Relation.LESS
    if result.co2 > selected.co2:
        return Relation.MORE
    return Relation.SAME


def build_mode_cards(
    results: Sequence[ModeResult],
    selected_key: str,
    by: SortKey = SortKey.EMISSION,
) -> list[ModeCard]:
    selected = next((r for r in results if r.key == selected_key), None)
    if selected is None:
        raise UnknownModeError(f"Selected mode {selected_key!r} not in results")

    max_co2 = max(r.co2 for r in results)
    max_time = max(r.time for r in results)
    max_cost = max(r.cost for r in results)

    ordered = sort_results(results, by)
    last = len(ordered) - 1
    cards: list[ModeCard] = []
    for position, result in enumerate(ordered):
        is_selected = result.key == selected_key
        cards.append(
            ModeCard(
                result=result,
                position=position,
                badge=_badge(position, last, is_selected),
                is_selected=is_selected,
                co2_delta=result.co2 - selected.co2,
                relation=None if is_selected else _relation(result, selected),
                co2_percent=bar_percentage(result.co2, max_co2),
                time_percent=bar_percentage(result.time, max_time),
                cost_percent=bar_percentage(result.cost, max_cost),
            )
        )
    return cards
