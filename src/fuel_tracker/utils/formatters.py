import math
import re
from decimal import ROUND_HALF_UP, Context, Decimal

THOUSANDS_SEPARATOR = re.compile(r"\B(?=(\d{3})+(?!\d))")
FUEL_UNIT = "л"
CURRENCY_SYMBOL = "₽"
ONE_DECIMAL = Decimal("0.1")
# wide enough for every finite float
WIDE_CONTEXT = Context(prec=400)


def _round_half_up(num: float) -> int:
    # Halves round toward positive infinity, so -500.5 becomes -500.
    return math.floor(num + 0.5)


def _one_decimal(num: float) -> str:
    # Decimal(num) is the exact binary value: 0.25 is a true half and rounds
    # up, while 0.95 is stored just below the half and rounds down.
    rounded = Decimal(num).quantize(
        ONE_DECIMAL, rounding=ROUND_HALF_UP, context=WIDE_CONTEXT
    )
    return str(rounded)


def format_number(num: float, with_decimals: bool = False) -> str:
    """Render a number with space-separated thousands.

    Whole numbers by default, one decimal place when ``with_decimals`` is set.
    """
    text = _one_decimal(num) if with_decimals else str(_round_half_up(num))
    return THOUSANDS_SEPARATOR.sub(" ", text)


def format_fuel(liters: float) -> str:
    return f"{_one_decimal(liters)} {FUEL_UNIT}"


def format_currency(amount: float) -> str:
    return f"{format_number(amount)} {CURRENCY_SYMBOL}"
