from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from src.fuel_tracker.records.schemas import NumericInput

Theme = Literal["system", "light", "dark"]
FontSize = Literal["normal", "medium", "large"]


class AppSettings(BaseModel):
    """The single global settings record. theme, font_size and show_analytics
    are presentation-only and never read by the statistics engine."""

    fuel_consumption_per_100km: float = Field(13.0, ge=0)
    total_mileage: float = Field(0.0, ge=0)
    current_fuel_amount: float = Field(0.0, ge=0)
    monthly_fuel_limit: float = Field(100.0, ge=0)
    default_fuel_price: float = Field(50.0, ge=0)
    monthly_budget: float = Field(5000.0, ge=0)
    show_analytics: bool = True
    font_size: FontSize = "normal"
    theme: Theme = "system"

    model_config = ConfigDict(from_attributes=True, frozen=True)


class AppSettingsUpdateDTO(BaseModel):
    """Partial settings update; omitted fields keep their current value."""

    fuel_consumption_per_100km: Optional[NumericInput] = None
    total_mileage: Optional[NumericInput] = None
    current_fuel_amount: Optional[NumericInput] = None
    monthly_fuel_limit: Optional[NumericInput] = None
    default_fuel_price: Optional[NumericInput] = None
    monthly_budget: Optional[NumericInput] = None
    show_analytics: Optional[bool] = None
    font_size: Optional[FontSize] = None
    theme: Optional[Theme] = None

    model_config = ConfigDict(extra="forbid")

    def apply(self, settings: AppSettings) -> AppSettings:
        changes = self.model_dump(exclude_none=True)
        return settings.model_copy(update=changes)
