from abc import ABC, abstractmethod
from typing import Optional

from src.fuel_tracker.state.schemas import AppState


class ISnapshotRepository(ABC):
    @abstractmethod
    async def get_snapshot(self) -> Optional[AppState]:
        """Returns the stored state, or None if nothing was saved yet"""
        ...

    @abstractmethod
    async def save_snapshot(self, state: AppState) -> None: ...
