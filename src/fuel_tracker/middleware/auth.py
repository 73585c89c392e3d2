import logging
from typing import cast

from fastapi import Request
from src.fuel_tracker.config import get_settings
from src.fuel_tracker.middleware.exceptions import (
    InvalidAPIKeyError,
    MissingAPIKeyError,
)

logger = logging.getLogger(__name__)


async def validate_api_key(request: Request) -> str:
    """Dependency validating the API key header of incoming requests."""
    settings = get_settings()
    api_key = request.headers.get(settings.FASTAPI_API_KEY_HEADER)
    if not api_key:
        logger.warning("Missing API key in request")
        raise MissingAPIKeyError(settings.FASTAPI_API_KEY_HEADER)
    if api_key != settings.FASTAPI_API_KEY:
        logger.warning("Invalid API key in request")
        raise InvalidAPIKeyError(settings.FASTAPI_API_KEY_HEADER, api_key)
    logger.debug("API key validated successfully")
    return cast(str, api_key)
