from typing import Dict, List

from pydantic import BaseModel, Field

from src.fuel_tracker.app_settings.schemas import AppSettings
from src.fuel_tracker.records.schemas import FuelRecord
from src.fuel_tracker.statistics.schemas import MonthlyStats


class AppState(BaseModel):
    """Everything the tracker persists, stored as one JSON snapshot."""

    records: List[FuelRecord] = Field(default_factory=list)
    current_month: str = Field(..., pattern=r"^\d{4}-\d{2}$")
    monthly_stats: Dict[str, MonthlyStats] = Field(default_factory=dict)
    settings: AppSettings = Field(default_factory=AppSettings)
