import logging

import redis.asyncio as redis
from redis.exceptions import RedisError

from src.fuel_tracker.config import get_settings

logger = logging.getLogger(__name__)


class RedisManager:
    """Owns the single Redis connection that backs the snapshot store."""

    def __init__(self):
        self.redis_client = None

    async def init_redis(self):
        settings = get_settings()
        self.redis_client = redis.Redis(
            host=settings.REDIS_HOST,
            port=settings.REDIS_PORT,
            db=settings.REDIS_DB,
            password=settings.REDIS_PASSWORD,
            socket_timeout=settings.REDIS_SOCKET_TIMEOUT,
            encoding="utf-8",
            decode_responses=True,
        )
        await self.redis_client.ping()
        logger.info(
            f"Redis connection initialized at {settings.REDIS_HOST}:"
            f"{settings.REDIS_PORT}/{settings.REDIS_DB}"
        )

    async def is_available(self) -> bool:
        if self.redis_client is None:
            return False
        try:
            return bool(await self.redis_client.ping())
        except RedisError as e:
            logger.warning(f"Redis ping failed: {e}")
            return False

    async def close_redis(self):
        if self.redis_client:
            await self.redis_client.aclose()
            logger.info("Redis connection closed")
            self.redis_client = None


redis_manager = RedisManager()
