from datetime import date
from typing import List, Optional

from src.fuel_tracker.state.exceptions import StorageException
from src.fuel_tracker.state.repositories.interface import ISnapshotRepository
from src.fuel_tracker.state.schemas import AppState

TODAY = date(2024, 1, 15)


class InMemorySnapshotRepository(ISnapshotRepository):
    """Keeps the snapshot as the same JSON text Redis would hold."""

    def __init__(self, initial: Optional[AppState] = None):
        self.raw: Optional[str] = initial.model_dump_json() if initial else None
        self.saved: List[AppState] = []
        self.fail_on_save = False

    async def get_snapshot(self) -> Optional[AppState]:
        if self.raw is None:
            return None
        return AppState.model_validate_json(self.raw)

    async def save_snapshot(self, state: AppState) -> None:
        if self.fail_on_save:
            raise StorageException("set", "memory", "save disabled")
        self.raw = state.model_dump_json()
        self.saved.append(state)
