from abc import ABC, abstractmethod
from typing import List, Tuple

from src.fuel_tracker.app_settings.schemas import AppSettings
from src.fuel_tracker.records.schemas import FuelRecord


class IFuelBalanceStrategy(ABC):
    @abstractmethod
    def balance(
        self,
        month: str,
        month_records: List[FuelRecord],
        all_records: List[FuelRecord],
        settings: AppSettings,
    ) -> Tuple[float, float]:
        """
        Return (start_fuel, end_fuel) for a month that has at least one record.
        """
        ...
