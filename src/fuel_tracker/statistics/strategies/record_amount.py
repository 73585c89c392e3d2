from typing import List, Tuple

from src.fuel_tracker.app_settings.schemas import AppSettings
from src.fuel_tracker.records.schemas import FuelRecord
from src.fuel_tracker.statistics.mileage import sort_by_date
from src.fuel_tracker.statistics.strategies.interface import IFuelBalanceStrategy


class RecordAmountFuelBalanceStrategy(IFuelBalanceStrategy):
    """Legacy behaviour: fuel added by the first and last fill-up of the month.

    This is an amount added, not a tank level. Kept for snapshots whose
    dashboards were built on it.
    """

    def balance(
        self,
        month: str,
        month_records: List[FuelRecord],
        all_records: List[FuelRecord],
        settings: AppSettings,
    ) -> Tuple[float, float]:
        ordered = sort_by_date(month_records)
        return ordered[0].fuel_amount, ordered[-1].fuel_amount
