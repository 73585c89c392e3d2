from datetime import date
from typing import Annotated, Optional
from uuid import uuid4

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from src.fuel_tracker.utils.validation import parse_numeric_input

# Accepts 12.5, "12.5" and "12,5"; rejects negatives and junk.
NumericInput = Annotated[float, BeforeValidator(parse_numeric_input)]


def generate_record_id() -> str:
    return uuid4().hex


class FuelRecord(BaseModel):
    """One fill-up event. daily_mileage is derived from the odometer readings."""

    id: str = Field(default_factory=generate_record_id)
    date: date
    total_mileage: Optional[float] = None
    daily_mileage: float = Field(0.0, ge=0)
    fuel_amount: float = Field(0.0, ge=0)
    fuel_price: Optional[float] = None
    total_cost: Optional[float] = None

    model_config = ConfigDict(from_attributes=True, frozen=True)


class FuelRecordInputDTO(BaseModel):
    """User-entered fields of a fill-up, used for both create and update."""

    date: Annotated[date, Field(description="Date in YYYY-MM-DD format")]
    total_mileage: Optional[NumericInput] = Field(
        None, description="Odometer reading at the fill-up"
    )
    fuel_amount: NumericInput = Field(..., description="Liters added")
    fuel_price: Optional[NumericInput] = Field(None, description="Price per liter")
    total_cost: Optional[NumericInput] = Field(None, description="Total cost")

    def to_record(self, record_id: Optional[str] = None) -> FuelRecord:
        data = self.model_dump()
        if record_id:
            data["id"] = record_id
        return FuelRecord(**data)
