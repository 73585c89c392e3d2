from typing import Dict, Iterable, Optional

from src.fuel_tracker.app_settings.schemas import AppSettings
from src.fuel_tracker.records.schemas import FuelRecord
from src.fuel_tracker.statistics.monthly import compute_monthly_stats
from src.fuel_tracker.statistics.schemas import MonthlyStats
from src.fuel_tracker.statistics.strategies.interface import IFuelBalanceStrategy
from src.fuel_tracker.statistics.utils import month_key


def recompute_all_months(
    records: Iterable[FuelRecord],
    settings: AppSettings,
    current_month: Optional[str] = None,
    balance_strategy: Optional[IFuelBalanceStrategy] = None,
) -> Dict[str, MonthlyStats]:
    """
    Rebuild the stats of every month that has records, from scratch.
    current_month is always included even when it has no records yet.
    """
    all_records = list(records)
    months = {month_key(r.date) for r in all_records}
    if current_month:
        months.add(current_month)

    return {
        month: compute_monthly_stats(all_records, month, settings, balance_strategy)
        for month in sorted(months)
    }
