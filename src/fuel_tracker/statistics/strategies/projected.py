from typing import List, Tuple

from src.fuel_tracker.app_settings.schemas import AppSettings
from src.fuel_tracker.records.schemas import FuelRecord
from src.fuel_tracker.statistics.daily import compute_daily_stats
from src.fuel_tracker.statistics.strategies.interface import IFuelBalanceStrategy
from src.fuel_tracker.statistics.utils import month_bounds


class ProjectedFuelBalanceStrategy(IFuelBalanceStrategy):
    """Tank level at the start of the first day and the end of the last day,
    using the same projection as the daily view."""

    def balance(
        self,
        month: str,
        month_records: List[FuelRecord],
        all_records: List[FuelRecord],
        settings: AppSettings,
    ) -> Tuple[float, float]:
        period_start, period_end = month_bounds(month)
        start = compute_daily_stats(all_records, settings, period_start)
        end = compute_daily_stats(all_records, settings, period_end)
        return start.start_fuel, end.end_fuel
