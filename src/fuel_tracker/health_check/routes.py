import logging
from http import HTTPStatus

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from src.fuel_tracker.redis.redis import redis_manager
from src.fuel_tracker.state.dependencies import get_fuel_tracker_service
from src.fuel_tracker.state.exceptions import StateNotLoadedException
from src.fuel_tracker.state.services import FuelTrackerService

logger = logging.getLogger(__name__)

health_router = APIRouter(prefix="/health", tags=["Health Check"])


@health_router.get("")
async def health_check(
    service: FuelTrackerService = Depends(get_fuel_tracker_service),
):
    """Report whether the snapshot store is reachable and the state is loaded."""
    storage_up = await redis_manager.is_available()
    try:
        records = len(service.get_records())
        state_loaded = True
    except StateNotLoadedException:
        records = 0
        state_loaded = False

    healthy = storage_up and state_loaded
    if not healthy:
        logger.warning(
            f"Health check degraded: storage_up={storage_up}, "
            f"state_loaded={state_loaded}"
        )
    return JSONResponse(
        status_code=HTTPStatus.OK if healthy else HTTPStatus.SERVICE_UNAVAILABLE,
        content={
            "status": "ok" if healthy else "degraded",
            "storage": "up" if storage_up else "down",
            "state_loaded": state_loaded,
            "records": records,
        },
    )
