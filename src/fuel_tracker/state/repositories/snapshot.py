import logging
from typing import Optional

from pydantic import ValidationError
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError
from redis.exceptions import TimeoutError as RedisTimeoutError
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from src.fuel_tracker.config import get_settings
from src.fuel_tracker.redis.redis import redis_manager
from src.fuel_tracker.state.exceptions import StorageException
from src.fuel_tracker.state.repositories.interface import ISnapshotRepository
from src.fuel_tracker.state.schemas import AppState

logger = logging.getLogger(__name__)

redis_retry = retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=0.5, min=0.5, max=4),
    retry=retry_if_exception_type((RedisConnectionError, RedisTimeoutError)),
    reraise=True,
)


class RedisSnapshotRepository(ISnapshotRepository):
    def __init__(self, storage_key: Optional[str] = None):
        self.storage_key = storage_key or get_settings().STORAGE_KEY

    def _client(self):
        if redis_manager.redis_client is None:
            logger.error("Redis client is not initialized")
            raise StorageException(
                "connect", self.storage_key, "Redis client is not initialized"
            )
        return redis_manager.redis_client

    @redis_retry
    async def _read(self) -> Optional[str]:
        return await self._client().get(self.storage_key)

    @redis_retry
    async def _write(self, payload: str) -> None:
        await self._client().set(self.storage_key, payload)

    async def get_snapshot(self) -> Optional[AppState]:
        try:
            raw = await self._read()
        except RedisError as e:
            logger.error(f"Failed to read snapshot {self.storage_key}: {e}")
            raise StorageException("get", self.storage_key, str(e)) from e

        if not raw:
            logger.info(f"No snapshot stored under {self.storage_key}")
            return None

        try:
            return AppState.model_validate_json(raw)
        except ValidationError as e:
            logger.error(f"Corrupted snapshot {self.storage_key}: {e}")
            raise StorageException("decode", self.storage_key, str(e)) from e

    async def save_snapshot(self, state: AppState) -> None:
        try:
            await self._write(state.model_dump_json())
        except RedisError as e:
            logger.error(f"Failed to save snapshot {self.storage_key}: {e}")
            raise StorageException("set", self.storage_key, str(e)) from e

        logger.info(
            f"Saved snapshot {self.storage_key} with {len(state.records)} records"
        )
