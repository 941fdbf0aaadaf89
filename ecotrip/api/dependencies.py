"""FastAPI dependency injection helpers."""

from fastapi import Depends

from ecotrip.config import settings
from ecotrip.domain.comparison import ComparisonEngine, PracticalBestThresholds
from ecotrip.domain.entities import ModeRegistry
from ecotrip.domain.reference_data import TRANSPORT_MODES, CityDirectory

_city_directory = CityDirectory()


def get_mode_registry() -> ModeRegistry:
    return TRANSPORT_MODES


def get_city_directory() -> CityDirectory:
    return _city_directory


def get_comparison_engine(
    modes: ModeRegistry = Depends(get_mode_registry),
) -> ComparisonEngine:
    """Build an engine from the current settings for the injected registry."""
    return ComparisonEngine(
        modes,
        carbon_price_per_kg=settings.carbon_price_per_kg,
        tree_absorption_kg=settings.tree_absorption_kg_per_year,
        thresholds=PracticalBestThresholds(
            slow_factor=settings.slow_trip_factor,
            min_hours=settings.slow_trip_min_hours,
            practical_factor=settings.practical_time_factor,
        ),
    )
