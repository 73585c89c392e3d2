import random
from datetime import date

from src.fuel_tracker.records.schemas import FuelRecord
from src.fuel_tracker.statistics.mileage import (
    reconstruct_daily_mileage,
    sort_by_date,
    sum_daily_mileage,
)


def _daily(records):
    return [r.daily_mileage for r in records]


def test_sequential_readings(january_records):
    result = reconstruct_daily_mileage(january_records)
    assert _daily(result) == [1000, 150, 150]


def test_no_movement_is_zero(january_records):
    records = [
        january_records[0],
        january_records[1].model_copy(update={"total_mileage": 1000}),
        january_records[2],
    ]
    result = reconstruct_daily_mileage(records)
    assert result[1].daily_mileage == 0
    assert result[2].daily_mileage == 300


def test_missing_reading_keeps_previous_reference():
    records = [
        FuelRecord(id="a", date=date(2024, 1, 1), total_mileage=1000),
        FuelRecord(id="b", date=date(2024, 1, 2), total_mileage=None),
        FuelRecord(id="c", date=date(2024, 1, 3), total_mileage=0),
        FuelRecord(id="d", date=date(2024, 1, 4), total_mileage=1200),
    ]
    assert _daily(reconstruct_daily_mileage(records)) == [1000, 0, 0, 200]


def test_first_usable_reading_is_baseline():
    records = [
        FuelRecord(id="a", date=date(2024, 1, 1), total_mileage=0, fuel_amount=50),
        FuelRecord(id="b", date=date(2024, 1, 2), total_mileage=1150, fuel_amount=30),
    ]
    assert _daily(reconstruct_daily_mileage(records)) == [0, 1150]


def test_rollback_clamps_to_zero():
    records = [
        FuelRecord(id="a", date=date(2024, 1, 1), total_mileage=1000),
        FuelRecord(id="b", date=date(2024, 1, 2), total_mileage=900),
        FuelRecord(id="c", date=date(2024, 1, 3), total_mileage=950),
    ]
    assert _daily(reconstruct_daily_mileage(records)) == [1000, 0, 50]


def test_out_of_order_insert_is_resorted(january_records):
    late_entry = FuelRecord(id="4", date=date(2023, 12, 31), total_mileage=900)
    result = reconstruct_daily_mileage([*january_records, late_entry])
    assert [r.id for r in result] == ["4", "1", "2", "3"]
    assert _daily(result) == [900, 100, 150, 150]


def test_same_day_records_keep_insertion_order():
    records = [
        FuelRecord(id="x", date=date(2024, 1, 2), total_mileage=1100),
        FuelRecord(id="y", date=date(2024, 1, 1), total_mileage=1000),
        FuelRecord(id="z", date=date(2024, 1, 2), total_mileage=1150),
    ]
    assert [r.id for r in sort_by_date(records)] == ["y", "x", "z"]
    assert _daily(reconstruct_daily_mileage(records)) == [1000, 100, 50]


def test_input_is_not_mutated(january_records):
    reconstruct_daily_mileage(january_records)
    assert _daily(january_records) == [0, 0, 0]


def test_daily_mileage_never_negative():
    rng = random.Random(7)
    records = [
        FuelRecord(
            id=str(i),
            date=date(2024, rng.randint(1, 12), rng.randint(1, 28)),
            total_mileage=rng.choice([None, 0, rng.uniform(0, 50000)]),
        )
        for i in range(60)
    ]
    assert all(r.daily_mileage >= 0 for r in reconstruct_daily_mileage(records))


def test_reconstruction_is_idempotent(january_records):
    once = reconstruct_daily_mileage(january_records)
    twice = reconstruct_daily_mileage(once)
    assert _daily(once) == _daily(twice)


def test_reconstruction_is_order_independent(january_records):
    expected = reconstruct_daily_mileage(january_records)
    shuffled = list(january_records)
    random.Random(3).shuffle(shuffled)
    assert reconstruct_daily_mileage(shuffled) == expected


def test_sum_daily_mileage(january_records):
    assert sum_daily_mileage(reconstruct_daily_mileage(january_records)) == 1300
    assert sum_daily_mileage([]) == 0
