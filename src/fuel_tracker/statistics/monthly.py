from typing import Iterable, List, Optional

from src.fuel_tracker.app_settings.schemas import AppSettings
from src.fuel_tracker.records.schemas import FuelRecord
from src.fuel_tracker.statistics.costs import total_cost
from src.fuel_tracker.statistics.mileage import sum_daily_mileage
from src.fuel_tracker.statistics.schemas import MonthlyStats
from src.fuel_tracker.statistics.strategies.interface import IFuelBalanceStrategy
from src.fuel_tracker.statistics.strategies.projected import (
    ProjectedFuelBalanceStrategy,
)
from src.fuel_tracker.statistics.utils import month_key


def filter_by_month(records: Iterable[FuelRecord], month: str) -> List[FuelRecord]:
    return [r for r in records if month_key(r.date) == month]


def empty_month_stats(settings: AppSettings) -> MonthlyStats:
    return MonthlyStats(
        start_fuel=settings.current_fuel_amount,
        end_fuel=settings.current_fuel_amount,
        remaining_fuel_limit=settings.monthly_fuel_limit,
        average_fuel_price=settings.default_fuel_price,
        remaining_budget=settings.monthly_budget,
    )


def compute_monthly_stats(
    records: Iterable[FuelRecord],
    month: str,
    settings: AppSettings,
    balance_strategy: Optional[IFuelBalanceStrategy] = None,
) -> MonthlyStats:
    """
    Aggregate a "YYYY-MM" month from records whose daily_mileage is already
    reconstructed. Averages fall back to 0 (or the default price) instead of
    dividing by zero. The remaining limit and budget never go negative;
    spending past the budget shows up in budget_overspent instead.
    """
    all_records = list(records)
    month_records = filter_by_month(all_records, month)
    if not month_records:
        return empty_month_stats(settings)

    strategy = balance_strategy or ProjectedFuelBalanceStrategy()

    mileage = sum_daily_mileage(month_records)
    fuel = sum(r.fuel_amount or 0.0 for r in month_records)
    cost = total_cost(month_records, settings.default_fuel_price)

    average_fuel_price = cost / fuel if fuel > 0 else settings.default_fuel_price
    average_consumption = (fuel / mileage) * 100 if mileage > 0 else 0.0
    cost_per_100km = (cost / mileage) * 100 if mileage > 0 else 0.0
    km_per_liter = mileage / fuel if mileage > 0 and fuel > 0 else 0.0
    budget = settings.monthly_budget
    budget_used_percent = (cost / budget) * 100 if budget > 0 else 0.0

    start_fuel, end_fuel = strategy.balance(
        month, month_records, all_records, settings
    )

    return MonthlyStats(
        total_mileage=mileage,
        total_fuel=fuel,
        fuel_consumption=fuel,
        average_consumption=average_consumption,
        start_fuel=start_fuel,
        end_fuel=end_fuel,
        remaining_fuel_limit=max(0.0, settings.monthly_fuel_limit - fuel),
        total_cost=cost,
        average_fuel_price=average_fuel_price,
        cost_per_100km=cost_per_100km,
        remaining_budget=max(0.0, budget - cost),
        budget_overspent=max(0.0, cost - budget),
        budget_used_percent=budget_used_percent,
        km_per_liter=km_per_liter,
    )
