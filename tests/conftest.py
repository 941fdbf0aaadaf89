"""
Shared test fixtures.

The API is driven in-process through ``httpx.AsyncClient`` over
``ASGITransport``; registries are swapped via ``app.dependency_overrides``.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from ecotrip.domain.comparison import compute_all_modes
from ecotrip.domain.entities import TransportMode


# ── Mode registries ───────────────────────────────────────────────────


@pytest.fixture
def scenario_modes() -> dict[str, TransportMode]:
    """Plane / train / car registry used by the 5000 km scenario."""
    return {
        "plane": TransportMode("plane", "Plane", "✈️", 0.15, 800.0, 0.10),
        "train": TransportMode("train", "Train", "🚆", 0.04, 200.0, 0.05),
        "car": TransportMode("car", "Car", "🚗", 0.12, 100.0, 0.08),
    }


@pytest.fixture
def slow_green_modes() -> dict[str, TransportMode]:
    """Registry whose cleanest mode is far slower than average."""
    return {
        "plane": TransportMode("plane", "Plane", "✈️", 0.25, 800.0, 0.10),
        "train": TransportMode("train", "Train", "🚆", 0.04, 160.0, 0.10),
        "bicycle": TransportMode("bicycle", "Bicycle", "🚲", 0.0, 15.0, 0.0),
    }


@pytest.fixture
def scenario_results(scenario_modes):
    return compute_all_modes(5000.0, scenario_modes)


@pytest.fixture
def slow_green_results(slow_green_modes):
    return compute_all_modes(1000.0, slow_green_modes)


# ── API client ────────────────────────────────────────────────────────


@pytest.fixture
def app():
    from ecotrip.api.app import create_app
    from ecotrip.api.middleware import limiter

    limiter.reset()
    return create_app()


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
