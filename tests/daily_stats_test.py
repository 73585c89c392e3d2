from datetime import date

import pytest

from src.fuel_tracker.app_settings.schemas import AppSettings
from src.fuel_tracker.records.schemas import FuelRecord
from src.fuel_tracker.statistics.daily import compute_daily_stats, theoretical_fuel_used
from src.fuel_tracker.statistics.mileage import reconstruct_daily_mileage


@pytest.fixture
def settings():
    return AppSettings(
        current_fuel_amount=20, total_mileage=1300, fuel_consumption_per_100km=10
    )


def test_theoretical_fuel_used():
    assert theoretical_fuel_used(150, 8) == 12
    assert theoretical_fuel_used(0, 8) == 0


def test_projection_for_day_with_records(january_records, settings):
    records = reconstruct_daily_mileage(january_records)
    stats = compute_daily_stats(records, settings, date(2024, 1, 2))

    # before: +50 l, 1000 km at 10 l/100km burns 100 l, clamped at empty
    assert stats.start_fuel == 0
    assert stats.fuel_added == 30
    assert stats.daily_mileage == 150
    assert stats.fuel_used == 15
    assert stats.end_fuel == 15
    assert stats.start_mileage == 1150
    assert stats.end_mileage == 1300


def test_projection_walks_earlier_records(settings):
    records = [
        FuelRecord(date=date(2024, 1, 1), daily_mileage=100, fuel_amount=40),
        FuelRecord(date=date(2024, 1, 2), daily_mileage=200, fuel_amount=0),
    ]
    stats = compute_daily_stats(records, settings, date(2024, 1, 5))

    assert stats.start_fuel == pytest.approx(20 + 40 - 30)
    assert stats.end_fuel == stats.start_fuel
    assert stats.daily_mileage == 0
    assert stats.start_mileage == stats.end_mileage == 1300


def test_later_records_are_ignored(settings):
    records = [FuelRecord(date=date(2024, 2, 1), daily_mileage=500, fuel_amount=60)]
    stats = compute_daily_stats(records, settings, date(2024, 1, 15))
    assert stats.start_fuel == 20
    assert stats.end_fuel == 20


def test_end_fuel_never_negative(settings):
    records = [FuelRecord(date=date(2024, 1, 1), daily_mileage=1000)]
    stats = compute_daily_stats(records, settings, date(2024, 1, 1))
    assert stats.start_fuel == 20
    assert stats.fuel_used == 100
    assert stats.end_fuel == 0


def test_same_day_records_are_summed(settings):
    records = [
        FuelRecord(date=date(2024, 1, 1), daily_mileage=50, fuel_amount=10),
        FuelRecord(date=date(2024, 1, 1), daily_mileage=50, fuel_amount=5),
    ]
    stats = compute_daily_stats(records, settings, date(2024, 1, 1))
    assert stats.fuel_added == 15
    assert stats.daily_mileage == 100
    assert stats.end_fuel == 25
