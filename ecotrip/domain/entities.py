"""
Domain value objects and errors.

Everything here is immutable: a query produces fresh ``ModeResult`` and
``ClassificationResult`` instances which are never modified afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from .enums import Category


class ConfigurationError(Exception):
    """Raised when the mode registry is empty or a mode is malformed."""


class UnknownModeError(LookupError):
    """Raised when the selected mode key is not among the computed results."""


class CityNotFoundError(LookupError):
    """Raised when a city name is not present in the city directory."""

    def __init__(self, name: str):
        super().__init__(f"City {name!r} not found")
        self.name = name


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class TransportMode:
    key: str
    name: str
    icon: str
    emission: float  # kg CO2 / km
    speed: float  # km / h
    cost: float  # currency / km

    @property
    def display(self) -> str:
        return f"{self.icon} {self.name}"


ModeRegistry = Mapping[str, TransportMode]


@dataclass(frozen=True)
class ModeResult:
    key: str
    mode: TransportMode
    co2: float  # kg
    time: float  # hours
    cost: float


@dataclass(frozen=True)
class ClassificationResult:
    """Classification of the selected mode plus the numbers used to explain it."""

    selected: ModeResult
    best_mode: ModeResult
    lowest_emission_mode: ModeResult
    worst_mode: ModeResult
    category: Category
    average_time: float
    long_journey: bool
    selected_carbon_cost: float
    best_carbon_cost: float
    worst_carbon_cost: float
    co2_excess: float
    carbon_cost_saving: float
    percent_more: Optional[float]
    time_difference: float
    trees_needed: float

    @property
    def is_faster_than_best(self) -> bool:
        return self.selected.time < self.best_mode.time

    @property
    def practical_override(self) -> bool:
        """True when the best mode is not simply the lowest-emission one."""
        return self.best_mode.key != self.lowest_emission_mode.key
