import logging
from http import HTTPStatus
from typing import List, Optional

from fastapi import APIRouter, Depends, Response
from src.fuel_tracker.middleware.auth import validate_api_key
from src.fuel_tracker.records.schemas import FuelRecord, FuelRecordInputDTO
from src.fuel_tracker.state.dependencies import get_fuel_tracker_service
from src.fuel_tracker.state.services import FuelTrackerService
from src.fuel_tracker.statistics.dependencies import validate_month

logger = logging.getLogger(__name__)
records_router = APIRouter(
    prefix="/records",
    tags=["Fuel Records"],
    dependencies=[Depends(validate_api_key)],
)


@records_router.get("", response_model=List[FuelRecord])
async def list_records(
    service: FuelTrackerService = Depends(get_fuel_tracker_service),
):
    return service.get_records()


@records_router.post("", response_model=FuelRecord, status_code=HTTPStatus.CREATED)
async def add_record(
    data: FuelRecordInputDTO,
    service: FuelTrackerService = Depends(get_fuel_tracker_service),
):
    logger.info(f"Adding fuel record for {data.date}")
    return await service.add_record(data)


@records_router.get("/last", response_model=Optional[FuelRecord])
async def get_last_record(
    service: FuelTrackerService = Depends(get_fuel_tracker_service),
):
    return service.get_last_record()


@records_router.get("/month/{month}", response_model=List[FuelRecord])
async def list_records_by_month(
    month: str = Depends(validate_month),
    service: FuelTrackerService = Depends(get_fuel_tracker_service),
):
    return service.get_records_by_month(month)


@records_router.put("/{record_id}", response_model=FuelRecord)
async def update_record(
    record_id: str,
    data: FuelRecordInputDTO,
    service: FuelTrackerService = Depends(get_fuel_tracker_service),
):
    logger.info(f"Updating fuel record {record_id}")
    return await service.update_record(record_id, data)


@records_router.delete("/{record_id}", status_code=HTTPStatus.NO_CONTENT)
async def delete_record(
    record_id: str,
    service: FuelTrackerService = Depends(get_fuel_tracker_service),
):
    logger.info(f"Deleting fuel record {record_id}")
    await service.delete_record(record_id)
    return Response(status_code=HTTPStatus.NO_CONTENT)
