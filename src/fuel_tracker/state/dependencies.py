from src.fuel_tracker.config import get_settings
from src.fuel_tracker.state.repositories.snapshot import RedisSnapshotRepository
from src.fuel_tracker.state.services import FuelTrackerService
from src.fuel_tracker.statistics.strategies.factory import FuelBalanceStrategyFactory

settings = get_settings()

snapshot_repo = RedisSnapshotRepository(settings.STORAGE_KEY)
service = FuelTrackerService(
    snapshot_repo,
    balance_strategy=FuelBalanceStrategyFactory.create(
        settings.MONTHLY_FUEL_BALANCE_MODE
    ),
    timezone=settings.TIMEZONE,
)


def get_fuel_tracker_service() -> FuelTrackerService:
    return service
