from src.fuel_tracker.statistics.enums import FuelBalanceMode
from src.fuel_tracker.statistics.strategies.interface import IFuelBalanceStrategy
from src.fuel_tracker.statistics.strategies.projected import (
    ProjectedFuelBalanceStrategy,
)
from src.fuel_tracker.statistics.strategies.record_amount import (
    RecordAmountFuelBalanceStrategy,
)


class FuelBalanceStrategyFactory:
    @staticmethod
    def create(mode: FuelBalanceMode | str) -> IFuelBalanceStrategy:
        if mode == FuelBalanceMode.projected:
            return ProjectedFuelBalanceStrategy()
        elif mode == FuelBalanceMode.record_amount:
            return RecordAmountFuelBalanceStrategy()
        else:
            raise ValueError(f"Unsupported fuel balance mode: {mode}")
