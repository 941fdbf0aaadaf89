"""
Static reference data: transport modes and city coordinates.

Coefficients are fixed averages per passenger.  Both tables are
insertion-ordered, which fixes the order of computed results and
therefore CO2 tie-breaking.
"""

from __future__ import annotations

from typing import Mapping, Optional

from .entities import CityNotFoundError, GeoPoint, ModeRegistry, TransportMode


_MODES = [
    TransportMode("plane", "Plane", "✈️", 0.255, 800.0, 0.12),
    TransportMode("train", "Train", "🚆", 0.041, 160.0, 0.10),
    TransportMode("car", "Car", "🚗", 0.192, 90.0, 0.15),
    TransportMode("electric_car", "Electric Car", "🔋", 0.053, 90.0, 0.05),
    TransportMode("bus", "Bus", "🚌", 0.105, 70.0, 0.06),
    TransportMode("bicycle", "Bicycle", "🚲", 0.0, 15.0, 0.0),
    TransportMode("walking", "Walking", "🚶", 0.0, 5.0, 0.0),
]

TRANSPORT_MODES: ModeRegistry = {m.key: m for m in _MODES}


CITY_COORDINATES: Mapping[str, GeoPoint] = {
    "new york": GeoPoint(40.7128, -74.0060),
    "london": GeoPoint(51.5074, -0.1278),
    "paris": GeoPoint(48.8566, 2.3522),
    "tokyo": GeoPoint(35.6762, 139.6503),
    "sydney": GeoPoint(-33.8688, 151.2093),
    "los angeles": GeoPoint(34.0522, -118.2437),
    "chicago": GeoPoint(41.8781, -87.6298),
    "toronto": GeoPoint(43.6532, -79.3832),
    "mexico city": GeoPoint(19.4326, -99.1332),
    "sao paulo": GeoPoint(-23.5505, -46.6333),
    "buenos aires": GeoPoint(-34.6037, -58.3816),
    "berlin": GeoPoint(52.5200, 13.4050),
    "madrid": GeoPoint(40.4168, -3.7038),
    "rome": GeoPoint(41.9028, 12.4964),
    "amsterdam": GeoPoint(52.3676, 4.9041),
    "brussels": GeoPoint(50.8503, 4.3517),
    "vienna": GeoPoint(48.2082, 16.3738),
    "stockholm": GeoPoint(59.3293, 18.0686),
    "moscow": GeoPoint(55.7558, 37.6173),
    "istanbul": GeoPoint(41.0082, 28.9784),
    "cairo": GeoPoint(30.0444, 31.2357),
    "nairobi": GeoPoint(-1.2921, 36.8219),
    "cape town": GeoPoint(-33.9249, 18.4241),
    "dubai": GeoPoint(25.2048, 55.2708),
    "mumbai": GeoPoint(19.0760, 72.8777),
    "delhi": GeoPoint(28.6139, 77.2090),
    "singapore": GeoPoint(1.3521, 103.8198),
    "hong kong": GeoPoint(22.3193, 114.1694),
    "beijing": GeoPoint(39.9042, 116.4074),
    "seoul": GeoPoint(37.5665, 126.9780),
    "bangkok": GeoPoint(13.7563, 100.5018),
    "auckland": GeoPoint(-36.8485, 174.7633),
}


def normalise_city(name: str) -> str:
    return name.strip().lower()


def display_city(name: str) -> str:
    return normalise_city(name).title()


class CityDirectory:
    """Case-insensitive city name -> ``GeoPoint`` lookup."""

    def __init__(self, coordinates: Optional[Mapping[str, GeoPoint]] = None):
        self._coordinates = dict(CITY_COORDINATES if coordinates is None else coordinates)

    def lookup(self, name: str) -> GeoPoint:
        try:
            return self._coordinates[normalise_city(name)]
        except KeyError:
            raise CityNotFoundError(name) from None

    def suggest(self, prefix: str = "") -> list[str]:
        """City names starting with *prefix*, in table order; all when empty."""
        needle = normalise_city(prefix)
        return [name for name in self._coordinates if name.startswith(needle)]

    def examples(self, count: int = 5) -> list[str]:
        return [display_city(name) for name in list(self._coordinates)[:count]]


def suggest_modes(query: str, modes: ModeRegistry = TRANSPORT_MODES) -> list[TransportMode]:
    """Modes whose display label contains *query* (case-insensitive)."""
    needle = query.strip().lower()
    return [m for m in modes.values() if needle in m.display.lower()]
