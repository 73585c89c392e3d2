import logging
from datetime import date, datetime
from typing import Optional

from fastapi import Query
from src.fuel_tracker.statistics.exceptions import (
    InvalidDateException,
    InvalidMonthException,
)
from src.fuel_tracker.statistics.utils import parse_month

logger = logging.getLogger(__name__)


def validate_month(month: str) -> str:
    """Path dependency rejecting anything that is not a real YYYY-MM month."""
    try:
        parse_month(month)
    except ValueError:
        logger.error("Invalid month format: %s", month)
        raise InvalidMonthException(month)
    return month


def optional_date(
    day: Optional[str] = Query(
        None, alias="date", description="Date in YYYY-MM-DD format, defaults to today"
    ),
) -> Optional[date]:
    if day is None:
        return None
    try:
        return datetime.strptime(day, "%Y-%m-%d").date()
    except ValueError:
        logger.error("Invalid date format: %s", day)
        raise InvalidDateException(day)
