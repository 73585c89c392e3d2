from typing import Iterable

from src.fuel_tracker.records.schemas import FuelRecord


def resolve_record_cost(record: FuelRecord, default_fuel_price: float) -> float:
    """
    Cost of a single fill-up, first match wins:
    the stored total_cost, then fuel_price * fuel_amount,
    then default_fuel_price * fuel_amount. Zero values count as missing.
    """
    if record.total_cost:
        return record.total_cost
    if record.fuel_price and record.fuel_amount:
        return record.fuel_price * record.fuel_amount
    if record.fuel_amount:
        return default_fuel_price * record.fuel_amount
    return 0.0


def total_cost(records: Iterable[FuelRecord], default_fuel_price: float) -> float:
    return sum(resolve_record_cost(r, default_fuel_price) for r in records)
