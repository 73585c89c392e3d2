import logging
from contextlib import asynccontextmanager
from http import HTTPStatus

from redis.exceptions import RedisError

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from fastapi.responses import JSONResponse
from src.fuel_tracker.app_settings.routes import settings_router
from src.fuel_tracker.config import get_settings
from src.fuel_tracker.health_check.routes import health_router
from src.fuel_tracker.logging_config import setup_logging
from src.fuel_tracker.records.routes import records_router
from src.fuel_tracker.redis.redis import redis_manager
from src.fuel_tracker.state.dependencies import get_fuel_tracker_service
from src.fuel_tracker.statistics.routes import stats_router

settings = get_settings()
setup_logging(settings.DEBUG_MODE)
logger = logging.getLogger(__name__)
PROJECT_NAME = settings.PROJECT_NAME
FastAPI_API_KEY_HEADER = settings.FASTAPI_API_KEY_HEADER
ALL_CORS_ORIGINS = settings.all_cors_origins


API_KEY_SCHEME = "APIKeyHeader"
SECURED_PATH_PREFIX = "/api/"


def custom_openapi():
    """OpenAPI document with the API-key header declared on the /api routes.

    /health is served without a key, so it is left unsecured.
    """
    if app.openapi_schema:
        return app.openapi_schema

    schema = get_openapi(
        title=PROJECT_NAME,
        version="0.1.0",
        description="Fuel consumption tracking API with monthly and daily statistics",
        routes=app.routes,
    )
    components = schema.setdefault("components", {})
    components["securitySchemes"] = {
        API_KEY_SCHEME: {
            "type": "apiKey",
            "in": "header",
            "name": FastAPI_API_KEY_HEADER,
        }
    }

    for path, operations in schema["paths"].items():
        if not path.startswith(SECURED_PATH_PREFIX):
            continue
        for operation in operations.values():
            operation["security"] = [{API_KEY_SCHEME: []}]

    app.openapi_schema = schema
    return schema


@asynccontextmanager
async def lifespan(app: FastAPI):  # type: ignore
    try:
        await redis_manager.init_redis()
        await get_fuel_tracker_service().load()
        logger.info("Startup complete")
        yield
        logger.info("Shutting down...")
    except Exception as e:
        logger.error(f"Startup failed: {str(e)}")
        raise
    finally:
        await redis_manager.close_redis()
        logger.info("Shutdown complete")


app = FastAPI(title=PROJECT_NAME, version="0.1.0", lifespan=lifespan)
app.openapi = custom_openapi  # type: ignore[method-assign]


@app.exception_handler(RedisError)
async def redis_exception_handler(request: Request, exc: RedisError):
    return JSONResponse(
        status_code=HTTPStatus.SERVICE_UNAVAILABLE,
        content={
            "detail": "Storage connection error. Please try again later.",
            "error": str(exc),
        },
    )


if ALL_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALL_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


# API Routes
api_router = APIRouter(prefix="/api")
api_router.include_router(records_router)
api_router.include_router(settings_router)
api_router.include_router(stats_router)
app.include_router(api_router)
app.include_router(health_router)
