"""
Trip endpoints
==============

POST /api/v1/trips/compare  -- compare every transport mode for a city pair
GET  /api/v1/trips/distance -- great-circle distance between two cities
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from ecotrip.api.dependencies import get_city_directory, get_comparison_engine
from ecotrip.api.middleware import RATE_LIMIT, limiter
from ecotrip.api.schemas import (
    ClassificationResponse,
    CompareRequest,
    CompareResponse,
    DistanceResponse,
    ErrorResponse,
    ModeCardResponse,
    ModeResultResponse,
)
from ecotrip.domain.comparison import ComparisonEngine
from ecotrip.domain.distance import distance_km
from ecotrip.domain.entities import (
    CityNotFoundError,
    ClassificationResult,
    GeoPoint,
    ModeResult,
)
from ecotrip.domain.messages import (
    carbon_cost_message,
    compare_text,
    format_co2,
    format_cost,
    format_distance,
    format_time,
    impact_message,
)
from ecotrip.domain.ranking import ModeCard, build_mode_cards
from ecotrip.domain.reference_data import CityDirectory, display_city

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/trips", tags=["trips"])


def _resolve_city(directory: CityDirectory, name: str) -> GeoPoint:
    try:
        return directory.lookup(name)
    except CityNotFoundError:
        raise HTTPException(
            status_code=404,
            detail=(
                f'City "{name.strip()}" not found in database. '
                f"Try: {', '.join(directory.examples())}, etc."
            ),
        ) from None


def _result_fields(r: ModeResult) -> dict:
    return dict(
        key=r.key,
        name=r.mode.name,
        icon=r.mode.icon,
        co2_kg=r.co2,
        time_hours=r.time,
        cost=r.cost,
        co2_display=format_co2(r.co2),
        time_display=format_time(r.time),
        cost_display=format_cost(r.cost),
    )


def _card_response(card: ModeCard) -> ModeCardResponse:
    return ModeCardResponse(
        **_result_fields(card.result),
        position=card.position,
        badge=card.badge,
        is_selected=card.is_selected,
        co2_delta_kg=card.co2_delta,
        relation=card.relation,
        comparison=compare_text(card),
        co2_percent=card.co2_percent,
        time_percent=card.time_percent,
        cost_percent=card.cost_percent,
    )


def _classification_response(c: ClassificationResult) -> ClassificationResponse:
    return ClassificationResponse(
        category=c.category,
        best_mode=c.best_mode.key,
        lowest_emission_mode=c.lowest_emission_mode.key,
        worst_mode=c.worst_mode.key,
        average_time_hours=c.average_time,
        long_journey=c.long_journey,
        selected_carbon_cost=c.selected_carbon_cost,
        best_carbon_cost=c.best_carbon_cost,
        worst_carbon_cost=c.worst_carbon_cost,
        co2_excess_kg=c.co2_excess,
        carbon_cost_saving=c.carbon_cost_saving,
        percent_more=c.percent_more,
        time_difference_hours=c.time_difference,
        faster_than_best=c.is_faster_than_best,
        trees_needed=c.trees_needed,
    )


@router.post(
    "/compare",
    response_model=CompareResponse,
    summary="Compare emissions, time and cost of every transport mode",
    responses={
        404: {"model": ErrorResponse, "description": "Unknown city."},
        422: {"model": ErrorResponse, "description": "Unknown mode."},
    },
)
@limiter.limit(RATE_LIMIT)
async def compare_trip(
    request: Request,
    body: CompareRequest,
    cities: CityDirectory = Depends(get_city_directory),
    engine: ComparisonEngine = Depends(get_comparison_engine),
):
    origin = _resolve_city(cities, body.source)
    destination = _resolve_city(cities, body.destination)

    if body.mode not in engine.modes:
        raise HTTPException(
            status_code=422,
            detail=f"Unknown transport mode {body.mode!r}. "
            f"Choose one of: {', '.join(engine.modes)}",
        )

    distance = distance_km(origin, destination)
    results, classification = engine.compare(distance, body.mode)
    cards = build_mode_cards(results, body.mode, body.sort_by)

    logger.info(
        "Compared %d modes for %s -> %s (%.0f km): %s is %s",
        len(results), body.source, body.destination, distance,
        body.mode, classification.category.value,
    )

    return CompareResponse(
        route=f"{display_city(body.source)} → {display_city(body.destination)}",
        distance_km=distance,
        distance_display=format_distance(distance),
        selected=ModeResultResponse(**_result_fields(classification.selected)),
        classification=_classification_response(classification),
        impact_message=impact_message(classification),
        carbon_cost_message=carbon_cost_message(classification),
        modes=[_card_response(card) for card in cards],
    )


@router.get(
    "/distance",
    response_model=DistanceResponse,
    summary="Great-circle distance between two cities",
    responses={404: {"model": ErrorResponse, "description": "Unknown city."}},
)
@limiter.limit(RATE_LIMIT)
async def trip_distance(
    request: Request,
    source: str = Query(..., min_length=1),
    destination: str = Query(..., min_length=1),
    cities: CityDirectory = Depends(get_city_directory),
):
    distance = distance_km(
        _resolve_city(cities, source), _resolve_city(cities, destination)
    )
    return DistanceResponse(
        source=display_city(source),
        destination=display_city(destination),
        distance_km=distance,
        distance_display=format_distance(distance),
    )
