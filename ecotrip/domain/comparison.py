"""
Mode Comparison Engine
======================

Per-mode metrics
----------------
For a trip of ``d`` km and every mode in the registry::

    co2  = d x emission_factor      (kg)
    time = d / speed                (hours)
    cost = d x cost_factor          (currency)

Best-mode heuristic
-------------------
The best mode is the lowest-emission one, *unless* that mode is
disproportionately slow::

    lowest.time > avg_time x 2   and   lowest.time > 10 h

in which case the first mode (ascending CO2) with
``time < avg_time x 1.5`` is picked as the *practical* best.

Classification (first match wins)
---------------------------------
PERFECT -> LOWEST_EMISSION -> WORST -> TRADEOFF

Complexity: O(M log M) per query, M = number of modes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from .entities import (
    ClassificationResult,
    ConfigurationError,
    ModeRegistry,
    ModeResult,
    UnknownModeError,
)
from .enums import Category

logger = logging.getLogger(__name__)

CARBON_PRICE_PER_KG = 0.025  # 25 per tonne
TREE_ABSORPTION_KG_PER_YEAR = 21.77


@dataclass(frozen=True)
class PracticalBestThresholds:
    slow_factor: float = 2.0
    min_hours: float = 10.0
    practical_factor: float = 1.5


DEFAULT_THRESHOLDS = PracticalBestThresholds()


# ── Per-mode metrics ──────────────────────────────────────────────────


def compute_all_modes(distance_km: float, modes: ModeRegistry) -> list[ModeResult]:
    """Return one ``ModeResult`` per registry entry, in registry order."""
    if not modes:
        raise ConfigurationError("Mode registry is empty")

    results: list[ModeResult] = []
    for key, mode in modes.items():
        if mode.speed <= 0:
            raise ConfigurationError(
                f"Transport mode {key!r} has non-positive speed {mode.speed}"
            )
        results.append(
            ModeResult(
                key=key,
                mode=mode,
                co2=distance_km * mode.emission,
                time=distance_km / mode.speed,
                cost=distance_km * mode.cost,
            )
        )
    return results


# ── Best-mode heuristic ───────────────────────────────────────────────


def average_time(results: Sequence[ModeResult]) -> float:
    return sum(r.time for r in results) / len(results)


def find_best_mode(
    results: Sequence[ModeResult],
    thresholds: PracticalBestThresholds = DEFAULT_THRESHOLDS,
) -> ModeResult:
    """
    Pick the mode balancing emissions against travel time.

    ``min`` / ``sorted`` are both stable, so CO2 ties resolve to the
    first result in input order.
    """
    lowest = min(results, key=lambda r: r.co2)
    avg = average_time(results)

    if lowest.time > avg * thresholds.slow_factor and lowest.time > thresholds.min_hours:
        for candidate in sorted(results, key=lambda r: r.co2):
            if candidate.time < avg * thresholds.practical_factor:
                logger.debug(
                    "Practical best %s overrides %s (%.1f h vs avg %.1f h)",
                    candidate.key, lowest.key, lowest.time, avg,
                )
                return candidate
    return lowest


# ── Classification ────────────────────────────────────────────────────


def _find_selected(selected_key: str, results: Sequence[ModeResult]) -> ModeResult:
    for r in results:
        if r.key == selected_key:
            return r
    raise UnknownModeError(f"Selected mode {selected_key!r} not in results")


def classify(
    selected_key: str,
    results: Sequence[ModeResult],
    *,
    thresholds: PracticalBestThresholds = DEFAULT_THRESHOLDS,
    carbon_price_per_kg: float = CARBON_PRICE_PER_KG,
    tree_absorption_kg: float = TREE_ABSORPTION_KG_PER_YEAR,
) -> ClassificationResult:
    """Classify *selected_key* against the cohort of *results*.

    Pure function: the input sequence is only read.
    """
    if not results:
        raise ConfigurationError("Cannot classify against an empty result set")
    selected = _find_selected(selected_key, results)

    lowest = min(results, key=lambda r: r.co2)
    worst = max(results, key=lambda r: r.co2)
    best = find_best_mode(results, thresholds)
    avg = average_time(results)

    if selected.co2 == best.co2 and selected.key == best.key:
        category = Category.PERFECT
    elif selected.co2 == lowest.co2:
        category = Category.LOWEST_EMISSION
    elif selected.co2 == worst.co2:
        category = Category.WORST
    else:
        category = Category.TRADEOFF

    selected_cost = selected.co2 * carbon_price_per_kg
    best_cost = best.co2 * carbon_price_per_kg
    percent_more: Optional[float] = None
    if best.co2 > 0:
        percent_more = (selected.co2 / best.co2 - 1) * 100

    return ClassificationResult(
        selected=selected,
        best_mode=best,
        lowest_emission_mode=lowest,
        worst_mode=worst,
        category=category,
        average_time=avg,
        long_journey=selected.time > avg * thresholds.slow_factor,
        selected_carbon_cost=selected_cost,
        best_carbon_cost=best_cost,
        worst_carbon_cost=worst.co2 * carbon_price_per_kg,
        co2_excess=selected.co2 - best.co2,
        carbon_cost_saving=selected_cost - best_cost,
        percent_more=percent_more,
        time_difference=abs(selected.time - best.time),
        trees_needed=selected.co2 / tree_absorption_kg,
    )


# ── Engine facade ─────────────────────────────────────────────────────


class ComparisonEngine:
    """High-level API used by the HTTP layer."""

    def __init__(
        self,
        modes: ModeRegistry,
        carbon_price_per_kg: float = CARBON_PRICE_PER_KG,
        tree_absorption_kg: float = TREE_ABSORPTION_KG_PER_YEAR,
        thresholds: PracticalBestThresholds = DEFAULT_THRESHOLDS,
    ):
        self.modes = modes
        self.carbon_price_per_kg = carbon_price_per_kg
        self.tree_absorption_kg = tree_absorption_kg
        self.thresholds = thresholds

    def compute_all_modes(self, distance_km: float) -> list[ModeResult]:
        return compute_all_modes(distance_km, self.modes)

    def classify(
        self, selected_key: str, results: Sequence[ModeResult]
    ) -> ClassificationResult:
        return classify(
            selected_key,
            results,
            thresholds=self.thresholds,
            carbon_price_per_kg=self.carbon_price_per_kg,
            tree_absorption_kg=self.tree_absorption_kg,
        )

    def compare(
        self, distance_km: float, selected_key: str
    ) -> tuple[list[ModeResult], ClassificationResult]:
        results = self.compute_all_modes(distance_km)
        return results, self.classify(selected_key, results)
