from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import APIRouter
from fastapi import Depends
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from vanguardmoney import __version__
from vanguardmoney.infrastructure.config.loggers import configure_loggers
from vanguardmoney.infrastructure.config.settings.app import app_settings
from vanguardmoney.infrastructure.entrypoints.api.dependencies import get_db
from vanguardmoney.infrastructure.entrypoints.api.errors import register_exception_handlers
from vanguardmoney.infrastructure.entrypoints.api.schemas import HealthCheckResponse
from vanguardmoney.infrastructure.entrypoints.api.v1.endpoints.auth import router as auth_router
from vanguardmoney.infrastructure.entrypoints.api.v1.endpoints.transactions import router as transaction_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    # Only load configuration loggers at bootstrap, not at import (testing conflicts).
    configure_loggers(level=app_settings.LOG_LEVEL, handlers=app_settings.LOG_HANDLERS)
    yield


app = FastAPI(
    title="Vanguard Money API",
    version=__version__,
    lifespan=lifespan,
    debug=app_settings.DEBUG,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=app_settings.CORS_ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_exception_handlers(app)

api_v1_router = APIRouter()
api_v1_router.include_router(auth_router, prefix="/auth", tags=["auth"])
api_v1_router.include_router(transaction_router, prefix="/transactions", tags=["transactions"])

app.include_router(api_v1_router, prefix=app_settings.API_V1_PREFIX)


@app.get("/health", name="health_check", tags=["health"])
async def health_check(db: AsyncSession = Depends(get_db)) -> HealthCheckResponse:
    """Health check endpoint to verify application and database status."""
    try:
        await db.execute(text("SELECT 1"))
    except Exception as e:
        return HealthCheckResponse(status="unhealthy", database=f"error: {str(e)}")
    else:
        return HealthCheckResponse(status="healthy", database="connected")
