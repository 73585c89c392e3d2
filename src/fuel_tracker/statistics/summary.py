from src.fuel_tracker.statistics.schemas import MonthlyStats, MonthlyStatsSummaryDTO
from src.fuel_tracker.utils.formatters import (
    format_currency,
    format_fuel,
    format_number,
)


def summarize_monthly_stats(month: str, stats: MonthlyStats) -> MonthlyStatsSummaryDTO:
    consumption = format_number(stats.average_consumption, with_decimals=True)
    used = format_number(stats.budget_used_percent, with_decimals=True)
    efficiency = format_number(stats.km_per_liter, with_decimals=True)
    return MonthlyStatsSummaryDTO(
        month=month,
        total_mileage=f"{format_number(stats.total_mileage)} км",
        total_fuel=format_fuel(stats.total_fuel),
        average_consumption=f"{consumption} л/100км",
        start_fuel=format_fuel(stats.start_fuel),
        end_fuel=format_fuel(stats.end_fuel),
        remaining_fuel_limit=format_fuel(stats.remaining_fuel_limit),
        total_cost=format_currency(stats.total_cost),
        average_fuel_price=format_currency(stats.average_fuel_price),
        cost_per_100km=format_currency(stats.cost_per_100km),
        remaining_budget=format_currency(stats.remaining_budget),
        budget_overspent=format_currency(stats.budget_overspent),
        budget_used_percent=f"{used} %",
        km_per_liter=f"{efficiency} км/л",
    )
