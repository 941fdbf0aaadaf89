"""
Reference data endpoints
========================

GET /api/v1/reference/modes   -- transport modes, filtered by ``q``
GET /api/v1/reference/cities  -- known cities, filtered by ``prefix``
GET /api/v1/reference/health  -- simple health check
"""

from fastapi import APIRouter, Depends, Query, Request

from ecotrip.api.dependencies import get_city_directory, get_mode_registry
from ecotrip.api.middleware import RATE_LIMIT, limiter
from ecotrip.api.schemas import CitySuggestion, HealthResponse, TransportModeResponse
from ecotrip.domain.entities import ModeRegistry
from ecotrip.domain.reference_data import CityDirectory, display_city, suggest_modes

router = APIRouter(prefix="/reference", tags=["reference"])


@router.get(
    "/modes",
    response_model=list[TransportModeResponse],
    summary="List transport modes whose label contains the query",
)
@limiter.limit(RATE_LIMIT)
async def list_modes(
    request: Request,
    q: str = Query("", max_length=50),
    modes: ModeRegistry = Depends(get_mode_registry),
):
    return [
        TransportModeResponse(
            key=m.key,
            name=m.name,
            icon=m.icon,
            display=m.display,
            emission_kg_per_km=m.emission,
            speed_kmh=m.speed,
            cost_per_km=m.cost,
        )
        for m in suggest_modes(q, modes)
    ]


@router.get(
    "/cities",
    response_model=list[CitySuggestion],
    summary="List known cities starting with the prefix",
)
@limiter.limit(RATE_LIMIT)
async def list_cities(
    request: Request,
    prefix: str = Query("", max_length=100),
    cities: CityDirectory = Depends(get_city_directory),
):
    suggestions: list[CitySuggestion] = []
    for key in cities.suggest(prefix):
        point = cities.lookup(key)
        suggestions.append(
            CitySuggestion(
                key=key,
                name=display_city(key),
                latitude=point.latitude,
                longitude=point.longitude,
            )
        )
    return suggestions


@router.get("/health", response_model=HealthResponse, summary="Health check")
@limiter.limit(RATE_LIMIT)
async def health(request: Request):
    return HealthResponse()
