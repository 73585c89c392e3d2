from datetime import date
from typing import Iterable

from src.fuel_tracker.app_settings.schemas import AppSettings
from src.fuel_tracker.records.schemas import FuelRecord
from src.fuel_tracker.statistics.schemas import DailyStats


def theoretical_fuel_used(mileage: float, consumption_per_100km: float) -> float:
    return (mileage * consumption_per_100km) / 100


def compute_daily_stats(
    records: Iterable[FuelRecord], settings: AppSettings, target_date: date
) -> DailyStats:
    """
    Project the tank balance for target_date.

    settings.current_fuel_amount is the anchor. The balance is walked through
    every earlier fill-up (adding fuel) and every earlier day of driving
    (burning fuel at the configured consumption rate). Balances never go
    below an empty tank.
    """
    rate = settings.fuel_consumption_per_100km

    previous_fuel_used = 0.0
    previous_fuel_added = 0.0
    today_fuel_added = 0.0
    today_mileage = 0.0

    for record in records:
        if record.date < target_date:
            previous_fuel_used += theoretical_fuel_used(record.daily_mileage, rate)
            previous_fuel_added += record.fuel_amount
        elif record.date == target_date:
            today_fuel_added += record.fuel_amount
            today_mileage += record.daily_mileage

    today_fuel_used = theoretical_fuel_used(today_mileage, rate)

    start_fuel = max(
        0.0,
        settings.current_fuel_amount + previous_fuel_added - previous_fuel_used,
    )
    end_fuel = max(0.0, start_fuel + today_fuel_added - today_fuel_used)

    return DailyStats(
        start_mileage=settings.total_mileage - today_mileage,
        end_mileage=settings.total_mileage,
        daily_mileage=today_mileage,
        fuel_added=today_fuel_added,
        start_fuel=start_fuel,
        end_fuel=end_fuel,
        fuel_used=today_fuel_used,
    )
