import logging
from datetime import date
from typing import Dict, Optional

from fastapi import APIRouter, Depends
from src.fuel_tracker.middleware.auth import validate_api_key
from src.fuel_tracker.state.dependencies import get_fuel_tracker_service
from src.fuel_tracker.state.services import FuelTrackerService
from src.fuel_tracker.statistics.dependencies import optional_date, validate_month
from src.fuel_tracker.statistics.schemas import (
    CurrentMonthDTO,
    DailyStats,
    MonthlyStats,
    MonthlyStatsSummaryDTO,
)

logger = logging.getLogger(__name__)
stats_router = APIRouter(
    prefix="/stats",
    tags=["Statistics"],
    dependencies=[Depends(validate_api_key)],
)


@stats_router.get("/monthly", response_model=Dict[str, MonthlyStats])
async def get_all_monthly_stats(
    service: FuelTrackerService = Depends(get_fuel_tracker_service),
):
    return service.get_all_monthly_stats()


@stats_router.get("/monthly/{month}", response_model=MonthlyStats)
async def get_monthly_stats(
    month: str = Depends(validate_month),
    service: FuelTrackerService = Depends(get_fuel_tracker_service),
):
    logger.info(f"Request monthly stats for {month}")
    return service.get_monthly_stats(month)


@stats_router.get("/monthly/{month}/summary", response_model=MonthlyStatsSummaryDTO)
async def get_monthly_summary(
    month: str = Depends(validate_month),
    service: FuelTrackerService = Depends(get_fuel_tracker_service),
):
    return service.get_monthly_summary(month)


@stats_router.get("/daily", response_model=DailyStats)
async def get_daily_stats(
    day: Optional[date] = Depends(optional_date),
    service: FuelTrackerService = Depends(get_fuel_tracker_service),
):
    logger.info(f"Request daily stats for {day or 'today'}")
    return service.get_daily_stats(day)


@stats_router.put("/current-month", response_model=MonthlyStats)
async def set_current_month(
    body: CurrentMonthDTO,
    service: FuelTrackerService = Depends(get_fuel_tracker_service),
):
    validate_month(body.month)
    return await service.set_current_month(body.month)

