from typing import Iterable, List, Optional

from src.fuel_tracker.records.schemas import FuelRecord


def sort_by_date(records: Iterable[FuelRecord]) -> List[FuelRecord]:
    # sorted() is stable, so same-day records keep their insertion order
    return sorted(records, key=lambda r: r.date)


def reconstruct_daily_mileage(records: Iterable[FuelRecord]) -> List[FuelRecord]:
    """
    Derive daily_mileage for every record from the cumulative odometer readings.

    Records are returned as new objects sorted by date. A record without a
    usable total_mileage drives 0 km. The first record with a reading is the
    baseline and gets its whole reading. Every later one gets the distance
    from the nearest earlier reading, clamped at 0 for odometer rollbacks.
    """
    result: List[FuelRecord] = []
    previous_mileage: Optional[float] = None

    for record in sort_by_date(records):
        if not record.total_mileage:
            daily_mileage = 0.0
        elif previous_mileage is None:
            daily_mileage = max(0.0, record.total_mileage)
        else:
            daily_mileage = max(0.0, record.total_mileage - previous_mileage)

        if record.total_mileage:
            previous_mileage = record.total_mileage

        result.append(record.model_copy(update={"daily_mileage": daily_mileage}))

    return result


def sum_daily_mileage(records: Iterable[FuelRecord]) -> float:
    return sum(r.daily_mileage or 0.0 for r in records)
