from pydantic import BaseModel, ConfigDict, Field


class MonthlyStats(BaseModel):
    total_mileage: float = 0.0
    total_fuel: float = 0.0
    fuel_consumption: float = 0.0
    average_consumption: float = 0.0
    start_fuel: float = 0.0
    end_fuel: float = 0.0
    remaining_fuel_limit: float = Field(0.0, ge=0)
    total_cost: float = 0.0
    average_fuel_price: float = 0.0
    cost_per_100km: float = 0.0
    remaining_budget: float = Field(0.0, ge=0)
    budget_overspent: float = Field(0.0, ge=0)
    budget_used_percent: float = Field(0.0, ge=0)
    km_per_liter: float = Field(0.0, ge=0)

    model_config = ConfigDict(frozen=True)


class DailyStats(BaseModel):
    start_mileage: float = 0.0
    end_mileage: float = 0.0
    daily_mileage: float = 0.0
    fuel_added: float = 0.0
    start_fuel: float = Field(0.0, ge=0)
    end_fuel: float = Field(0.0, ge=0)
    fuel_used: float = 0.0

    model_config = ConfigDict(frozen=True)


class MonthlyStatsSummaryDTO(BaseModel):
    """Display strings for a month, formatted the way the dashboard shows them."""

    month: str
    total_mileage: str
    total_fuel: str
    average_consumption: str
    start_fuel: str
    end_fuel: str
    remaining_fuel_limit: str
    total_cost: str
    average_fuel_price: str
    cost_per_100km: str
    remaining_budget: str
    budget_overspent: str
    budget_used_percent: str
    km_per_liter: str


class CurrentMonthDTO(BaseModel):
    month: str = Field(..., pattern=r"^\d{4}-\d{2}$", description="Month as YYYY-MM")
