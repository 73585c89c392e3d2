from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from src.fuel_tracker.redis.redis import redis_manager
from src.fuel_tracker.main import app
from src.fuel_tracker.state.dependencies import get_fuel_tracker_service
from src.fuel_tracker.state.services import FuelTrackerService
from tests.mocks.repository_mocks import InMemorySnapshotRepository


@pytest.fixture
def mock_redis():
    mock_client = AsyncMock()
    mock_client.ping.return_value = True
    redis_manager.redis_client = mock_client
    yield mock_client
    redis_manager.redis_client = None


async def test_health_check(async_client, mock_redis):
    response = await async_client.get("/health")
    assert response.status_code == 200, response.text
    data = response.json()
    assert data["status"] == "ok"
    assert data["storage"] == "up"
    assert data["records"] == 0


async def test_health_check_storage_down(async_client, mock_redis):
    mock_redis.ping.side_effect = RedisConnectionError("down")
    response = await async_client.get("/health")
    assert response.status_code == 503
    assert response.json()["storage"] == "down"


async def test_health_check_without_redis_client(async_client):
    redis_manager.redis_client = None
    response = await async_client.get("/health")
    assert response.status_code == 503
    assert response.json()["status"] == "degraded"


async def test_health_check_state_not_loaded(async_client, mock_redis):
    unloaded = FuelTrackerService(InMemorySnapshotRepository())
    app.dependency_overrides[get_fuel_tracker_service] = lambda: unloaded

    response = await async_client.get("/health")

    assert response.status_code == 503
    assert response.json()["state_loaded"] is False
