import re
from datetime import date, datetime, timedelta
from typing import Tuple

MONTH_PATTERN = re.compile(r"\d{4}-\d{2}")


def month_key(d: date) -> str:
    return f"{d.year:04d}-{d.month:02d}"


def parse_month(month: str) -> date:
    """Parse a "YYYY-MM" key into the first day of that month."""
    try:
        if not MONTH_PATTERN.fullmatch(month):
            raise ValueError(month)
        return datetime.strptime(month, "%Y-%m").date()
    except (TypeError, ValueError):
        raise ValueError(f"Invalid month, expected YYYY-MM: {month!r}")


def get_month_end(start: date) -> date:
    if start.month == 12:
        return date(start.year + 1, 1, 1) - timedelta(days=1)
    return date(start.year, start.month + 1, 1) - timedelta(days=1)


def month_bounds(month: str) -> Tuple[date, date]:
    start = parse_month(month)
    return start, get_month_end(start)
