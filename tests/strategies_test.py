from datetime import date

import pytest

from src.fuel_tracker.records.schemas import FuelRecord
from src.fuel_tracker.statistics.enums import FuelBalanceMode
from src.fuel_tracker.statistics.strategies.factory import FuelBalanceStrategyFactory
from src.fuel_tracker.statistics.strategies.projected import (
    ProjectedFuelBalanceStrategy,
)
from src.fuel_tracker.statistics.strategies.record_amount import (
    RecordAmountFuelBalanceStrategy,
)


@pytest.mark.parametrize(
    "mode, expected",
    [
        (FuelBalanceMode.projected, ProjectedFuelBalanceStrategy),
        ("projected", ProjectedFuelBalanceStrategy),
        (FuelBalanceMode.record_amount, RecordAmountFuelBalanceStrategy),
        ("record_amount", RecordAmountFuelBalanceStrategy),
    ],
)
def test_factory_creates_strategy(mode, expected):
    assert isinstance(FuelBalanceStrategyFactory.create(mode), expected)


def test_factory_rejects_unknown_mode():
    with pytest.raises(ValueError):
        FuelBalanceStrategyFactory.create("running_total")


def test_projected_balance_uses_earlier_months(mock_settings):
    december = FuelRecord(date=date(2023, 12, 10), daily_mileage=500, fuel_amount=60)
    january = FuelRecord(date=date(2024, 1, 10), daily_mileage=100, fuel_amount=20)

    start, end = ProjectedFuelBalanceStrategy().balance(
        "2024-01", [january], [december, january], mock_settings
    )

    # 100 + 60 - 40 carried in, then + 20 - 8 during January
    assert start == pytest.approx(120)
    assert end == pytest.approx(132)


def test_record_amount_balance_uses_date_order(mock_settings):
    records = [
        FuelRecord(date=date(2024, 1, 20), fuel_amount=35),
        FuelRecord(date=date(2024, 1, 3), fuel_amount=12),
        FuelRecord(date=date(2024, 1, 9), fuel_amount=40),
    ]
    start, end = RecordAmountFuelBalanceStrategy().balance(
        "2024-01", records, records, mock_settings
    )
    assert (start, end) == (12, 35)
