import logging

from fastapi import APIRouter, Depends
from src.fuel_tracker.app_settings.schemas import AppSettings, AppSettingsUpdateDTO
from src.fuel_tracker.middleware.auth import validate_api_key
from src.fuel_tracker.state.dependencies import get_fuel_tracker_service
from src.fuel_tracker.state.services import FuelTrackerService

logger = logging.getLogger(__name__)
settings_router = APIRouter(
    prefix="/settings",
    tags=["Settings"],
    dependencies=[Depends(validate_api_key)],
)


@settings_router.get("", response_model=AppSettings)
async def get_app_settings(
    service: FuelTrackerService = Depends(get_fuel_tracker_service),
):
    return service.get_settings()


@settings_router.patch("", response_model=AppSettings)
async def update_app_settings(
    update: AppSettingsUpdateDTO,
    service: FuelTrackerService = Depends(get_fuel_tracker_service),
):
    logger.info(f"Updating settings: {update.model_dump(exclude_none=True)}")
    return await service.update_settings(update)


@settings_router.post("/reset", response_model=AppSettings)
async def reset_app_settings(
    service: FuelTrackerService = Depends(get_fuel_tracker_service),
):
    return await service.reset_settings()
