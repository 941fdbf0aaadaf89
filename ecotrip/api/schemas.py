"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from ecotrip.domain.enums import Badge, Category, Relation, SortKey


# ── Requests ──────────────────────────────────────────────────────────


class CompareRequest(BaseModel):
    source: str = Field(..., min_length=1, max_length=100)
    destination: str = Field(..., min_length=1, max_length=100)
    mode: str = Field(..., min_length=1, description="Transport mode key, e.g. 'train'.")
    sort_by: SortKey = SortKey.EMISSION


# ── Responses ─────────────────────────────────────────────────────────


class TransportModeResponse(BaseModel):
    key: str
    name: str
    icon: str
    display: str
    emission_kg_per_km: float
    speed_kmh: float
    cost_per_km: float


class ModeResultResponse(BaseModel):
    key: str
    name: str
    icon: str
    co2_kg: float
    time_hours: float
    cost: float
    co2_display: str
    time_display: str
    cost_display: str


class ModeCardResponse(ModeResultResponse):
    position: int
    badge: Optional[Badge] = None
    is_selected: bool
    co2_delta_kg: float
    relation: Optional[Relation] = None
    comparison: str
    co2_percent: float
    time_percent: float
    cost_percent: float


class ClassificationResponse(BaseModel):
    category: Category
    best_mode: str
    lowest_emission_mode: str
    worst_mode: str
    average_time_hours: float
    long_journey: bool
    selected_carbon_cost: float
    best_carbon_cost: float
    worst_carbon_cost: float
    co2_excess_kg: float
    carbon_cost_saving: float
    percent_more: Optional[float] = None
    time_difference_hours: float
    faster_than_best: bool
    trees_needed: float


class CompareResponse(BaseModel):
    route: str
    distance_km: float
    distance_display: str
    selected: ModeResultResponse
    classification: ClassificationResponse
    impact_message: str
    carbon_cost_message: str
    modes: list[ModeCardResponse] = []


class DistanceResponse(BaseModel):
    source: str
    destination: str
    distance_km: float
    distance_display: str


class CitySuggestion(BaseModel):
    key: str
    name: str
    latitude: float
    longitude: float


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    detail: str
