import asyncio
import logging
from datetime import date
from typing import Dict, List, Optional

import pendulum

from src.fuel_tracker.app_settings.schemas import AppSettings, AppSettingsUpdateDTO
from src.fuel_tracker.records.exceptions import RecordNotFoundException
from src.fuel_tracker.records.schemas import FuelRecord, FuelRecordInputDTO
from src.fuel_tracker.state.exceptions import StateNotLoadedException
from src.fuel_tracker.state.repositories.interface import ISnapshotRepository
from src.fuel_tracker.state.schemas import AppState
from src.fuel_tracker.statistics.daily import compute_daily_stats
from src.fuel_tracker.statistics.mileage import (
    reconstruct_daily_mileage,
    sum_daily_mileage,
)
from src.fuel_tracker.statistics.monthly import compute_monthly_stats, filter_by_month
from src.fuel_tracker.statistics.recompute import recompute_all_months
from src.fuel_tracker.statistics.schemas import (
    DailyStats,
    MonthlyStats,
    MonthlyStatsSummaryDTO,
)
from src.fuel_tracker.statistics.strategies.interface import IFuelBalanceStrategy
from src.fuel_tracker.statistics.strategies.projected import (
    ProjectedFuelBalanceStrategy,
)
from src.fuel_tracker.statistics.summary import summarize_monthly_stats
from src.fuel_tracker.statistics.utils import month_key

logger = logging.getLogger(__name__)


class FuelTrackerService:
    """
    Single owner of the record set and settings.

    Mutations are serialized by a lock. Each one rebuilds the whole state
    (daily mileage, total mileage, every month's stats), saves the snapshot,
    and only then replaces the in-memory state, so a failed save changes
    nothing.
    """

    def __init__(
        self,
        repository: ISnapshotRepository,
        balance_strategy: Optional[IFuelBalanceStrategy] = None,
        timezone: str = "UTC",
    ):
        self.repository = repository
        self.balance_strategy = balance_strategy or ProjectedFuelBalanceStrategy()
        self.timezone = timezone
        self._state: Optional[AppState] = None
        self._lock = asyncio.Lock()

    @property
    def state(self) -> AppState:
        if self._state is None:
            raise StateNotLoadedException()
        return self._state

    def today(self) -> date:
        return pendulum.now(self.timezone).date()

    def _build_state(
        self, records: List[FuelRecord], settings: AppSettings, current_month: str
    ) -> AppState:
        rebuilt = reconstruct_daily_mileage(records)
        monthly_stats = recompute_all_months(
            rebuilt, settings, current_month, self.balance_strategy
        )
        return AppState(
            records=rebuilt,
            current_month=current_month,
            monthly_stats=monthly_stats,
            settings=settings,
        )

    async def _commit(self, state: AppState) -> AppState:
        await self.repository.save_snapshot(state)
        self._state = state
        return state

    async def _replace_records(self, records: List[FuelRecord]) -> AppState:
        old_state = self.state
        rebuilt = reconstruct_daily_mileage(records)

        # total_mileage tracks the summed daily mileage, so shift it by the
        # difference rather than by the edited record alone.
        delta = sum_daily_mileage(rebuilt) - sum_daily_mileage(old_state.records)
        settings = old_state.settings.model_copy(
            update={
                "total_mileage": max(0.0, old_state.settings.total_mileage + delta)
            }
        )
        logger.debug(f"Total mileage changed by {delta}")

        new_state = self._build_state(rebuilt, settings, old_state.current_month)
        return await self._commit(new_state)

    async def load(self) -> AppState:
        async with self._lock:
            snapshot = await self.repository.get_snapshot()
            today_month = month_key(self.today())

            if snapshot is None:
                logger.info("No stored data, starting with default state")
                self._state = self._build_state([], AppSettings(), today_month)
                return self._state

            state = self._build_state(
                snapshot.records, snapshot.settings, snapshot.current_month
            )
            if today_month not in state.monthly_stats:
                state.monthly_stats[today_month] = compute_monthly_stats(
                    state.records, today_month, state.settings, self.balance_strategy
                )

            if state.records:
                await self.repository.save_snapshot(state)
            self._state = state
            logger.info(f"Loaded state with {len(state.records)} records")
            return state

    # ------------------------------------------------------------------
    # Records
    # ------------------------------------------------------------------
    async def add_record(self, data: FuelRecordInputDTO) -> FuelRecord:
        async with self._lock:
            record = data.to_record()
            state = await self._replace_records([*self.state.records, record])
            logger.info(f"Added record {record.id} on {record.date}")
            return self._find_record(state, record.id)

    async def update_record(
        self, record_id: str, data: FuelRecordInputDTO
    ) -> FuelRecord:
        async with self._lock:
            records = self.state.records
            if not any(r.id == record_id for r in records):
                logger.warning(f"Record not found: {record_id}")
                raise RecordNotFoundException(record_id)

            updated = [
                data.to_record(record_id) if r.id == record_id else r for r in records
            ]
            state = await self._replace_records(updated)
            logger.info(f"Updated record {record_id}")
            return self._find_record(state, record_id)

    async def delete_record(self, record_id: str) -> None:
        async with self._lock:
            records = self.state.records
            remaining = [r for r in records if r.id != record_id]
            if len(remaining) == len(records):
                logger.warning(f"Record not found: {record_id}")
                raise RecordNotFoundException(record_id)

            await self._replace_records(remaining)
            logger.info(f"Deleted record {record_id}")

    def _find_record(self, state: AppState, record_id: str) -> FuelRecord:
        for record in state.records:
            if record.id == record_id:
                return record
        raise RecordNotFoundException(record_id)

    def get_records(self) -> List[FuelRecord]:
        return list(self.state.records)

    def get_records_by_month(self, month: str) -> List[FuelRecord]:
        return filter_by_month(self.state.records, month)

    def get_last_record(self) -> Optional[FuelRecord]:
        records = self.state.records
        return records[-1] if records else None

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------
    def get_settings(self) -> AppSettings:
        return self.state.settings

    async def update_settings(self, update: AppSettingsUpdateDTO) -> AppSettings:
        async with self._lock:
            state = self.state
            settings = update.apply(state.settings)
            new_state = self._build_state(state.records, settings, state.current_month)
            await self._commit(new_state)
            logger.info("Settings updated, monthly stats recomputed")
            return new_state.settings

    async def reset_settings(self) -> AppSettings:
        async with self._lock:
            state = self.state
            # total_mileage is derived from the records, not a preference
            settings = AppSettings(total_mileage=state.settings.total_mileage)
            new_state = self._build_state(state.records, settings, state.current_month)
            await self._commit(new_state)
            logger.info("Settings reset to defaults")
            return new_state.settings

    # ------------------------------------------------------------------
    # Statistics
    # ------------------------------------------------------------------
    async def set_current_month(self, month: str) -> MonthlyStats:
        async with self._lock:
            state = self.state
            new_state = self._build_state(state.records, state.settings, month)
            await self._commit(new_state)
            return new_state.monthly_stats[month]

    def get_all_monthly_stats(self) -> Dict[str, MonthlyStats]:
        return dict(self.state.monthly_stats)

    def get_monthly_stats(self, month: str) -> MonthlyStats:
        state = self.state
        cached = state.monthly_stats.get(month)
        if cached is not None:
            return cached
        return compute_monthly_stats(
            state.records, month, state.settings, self.balance_strategy
        )

    def get_monthly_summary(self, month: str) -> MonthlyStatsSummaryDTO:
        return summarize_monthly_stats(month, self.get_monthly_stats(month))

    def get_daily_stats(self, target_date: Optional[date] = None) -> DailyStats:
        state = self.state
        return compute_daily_stats(
            state.records, state.settings, target_date or self.today()
        )
