from enum import Enum


class FuelBalanceMode(str, Enum):
    projected = "projected"
    record_amount = "record_amount"
