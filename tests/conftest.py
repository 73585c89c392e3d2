from contextlib import asynccontextmanager
from datetime import date

import pytest
from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient

from src.fuel_tracker.app_settings.schemas import AppSettings
from src.fuel_tracker.main import app
from src.fuel_tracker.records.schemas import FuelRecord
from src.fuel_tracker.state.dependencies import get_fuel_tracker_service
from src.fuel_tracker.state.services import FuelTrackerService
from tests.mocks.config_mocks import mock_get_settings  # noqa: F401
from tests.mocks.repository_mocks import TODAY, InMemorySnapshotRepository

# -----------------------------------------------------------------------------
# ENGINE FIXTURES
# -----------------------------------------------------------------------------


@pytest.fixture
def january_records():
    return [
        FuelRecord(
            id="1",
            date=date(2024, 1, 1),
            total_mileage=1000,
            fuel_amount=50,
            fuel_price=50,
            total_cost=2500,
        ),
        FuelRecord(
            id="2",
            date=date(2024, 1, 2),
            total_mileage=1150,
            fuel_amount=30,
            fuel_price=50,
            total_cost=1500,
        ),
        FuelRecord(
            id="3",
            date=date(2024, 1, 3),
            total_mileage=1300,
            fuel_amount=40,
            fuel_price=50,
            total_cost=2000,
        ),
    ]


@pytest.fixture
def mock_settings():
    return AppSettings(
        current_fuel_amount=100,
        monthly_fuel_limit=200,
        default_fuel_price=50,
        fuel_consumption_per_100km=8,
    )


# -----------------------------------------------------------------------------
# SERVICE FIXTURES
# -----------------------------------------------------------------------------


@pytest.fixture
def snapshot_repo():
    return InMemorySnapshotRepository()


@pytest.fixture
async def fuel_service(snapshot_repo, monkeypatch):
    service = FuelTrackerService(snapshot_repo, timezone="UTC")
    monkeypatch.setattr(service, "today", lambda: TODAY)
    await service.load()
    return service


# -----------------------------------------------------------------------------
# FASTAPI CLIENT FOR API TESTING
# -----------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def reset_openapi_schema():
    app.openapi_schema = None
    yield
    app.openapi_schema = None


@pytest.fixture(scope="function")
async def async_client(fuel_service):
    """
    Provide an async client for FastAPI test with lifespan events.
    The tracker service is backed by an in-memory snapshot.
    """

    @asynccontextmanager
    async def test_lifespan(_):
        yield

    app.router.lifespan_context = test_lifespan
    app.dependency_overrides[get_fuel_tracker_service] = lambda: fuel_service
    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    app.dependency_overrides.clear()
