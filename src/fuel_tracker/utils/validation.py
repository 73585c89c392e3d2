import math
import re
from typing import Any

DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")


def format_numeric_input(text: str) -> str:
    """Normalize a comma decimal separator to a period (first comma only)."""
    return text.replace(",", ".", 1)


def validate_numeric_input(value: str, min_value: float = 0) -> bool:
    """
    Returns True if the user-entered string is a plain, finite decimal number
    greater than or equal to min_value. Both "10,5" and "10.5" are accepted.
    """
    normalized = format_numeric_input(value).strip()
    if not DECIMAL_PATTERN.fullmatch(normalized):
        return False
    number = float(normalized)
    # overlong digit strings overflow to inf
    return math.isfinite(number) and number >= min_value


def parse_numeric_input(value: Any, min_value: float = 0) -> Any:
    """
    Convert raw form input into a float, rejecting anything
    validate_numeric_input would reject. None passes through untouched.
    """
    if value is None:
        return value

    if isinstance(value, bool):
        raise ValueError(f"Invalid numeric value: {value!r}")

    if isinstance(value, (int, float)):
        number = float(value)
        if math.isnan(number) or math.isinf(number):
            raise ValueError(f"Invalid numeric value: {value!r}")
        if number < min_value:
            raise ValueError(f"Value must be greater than or equal to {min_value}")
        return number

    if isinstance(value, str):
        if not validate_numeric_input(value, min_value):
            raise ValueError(f"Invalid numeric value: {value!r}")
        return float(format_numeric_input(value).strip())

    raise ValueError(f"Unsupported numeric input type: {type(value).__name__}")
