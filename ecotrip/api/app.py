"""
FastAPI application factory.

* Registers routes for trips and reference data.
* Maps mode-registry configuration errors to ``500`` responses.
* Applies rate-limiting middleware.
* Swagger / OpenAPI UI available at ``/docs``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from ecotrip.api.middleware import limiter
from ecotrip.api.routes import reference, trips
from ecotrip.config import settings
from ecotrip.domain.entities import ConfigurationError

logging.basicConfig(level=settings.log_level)

logger = logging.getLogger(__name__)


async def _configuration_error_handler(
    request: Request, exc: ConfigurationError
) -> JSONResponse:
    logger.error("Mode registry misconfigured: %s", exc)
    return JSONResponse(status_code=500, content={"detail": str(exc)})


def create_app() -> FastAPI:
    app = FastAPI(
        title="Travel Emissions Comparison API",
        description=(
            "Computes the great-circle distance between two cities and "
            "compares CO₂ emissions, travel time and cost across transport "
            "modes, explaining how the chosen mode ranks."
        ),
        version="1.0.0",
    )

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_exception_handler(ConfigurationError, _configuration_error_handler)

    # Routers
    app.include_router(trips.router, prefix="/api/v1")
    app.include_router(reference.router, prefix="/api/v1")

    return app
