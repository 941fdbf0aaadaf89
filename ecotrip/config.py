"""Centralised application settings loaded from environment / .env file."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Carbon accounting
    carbon_price_per_kg: float = 0.025  # 25 per tonne
    tree_absorption_kg_per_year: float = 21.77

    # Practical-best heuristic
    slow_trip_factor: float = 2.0  # x average travel time
    slow_trip_min_hours: float = 10.0
    practical_time_factor: float = 1.5  # x average travel time

    # API
    rate_limit: str = "100/minute"
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
