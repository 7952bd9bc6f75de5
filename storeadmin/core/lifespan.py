"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py;
no business logic here, only wiring of infrastructure (telemetry,
DB engine dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from storeadmin.core.config import get_settings
from storeadmin.infrastructure.persistence import database
from storeadmin.shared.telemetry.telemetry import (
    TelemetryConfig,
    get_telemetry,
    set_telemetry,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: telemetry (if enabled) with FastAPI and SQLAlchemy
    instrumentation. Shutdown: telemetry shutdown, SQL engine dispose.
    """
    settings = get_settings()

    # ---- Startup ----
    if settings.telemetry_enabled:
        telemetry = TelemetryConfig(
            service_name=settings.app_name,
            service_version=settings.app_version,
            enabled=True,
            environment=settings.telemetry_environment,
        )
        telemetry.setup_telemetry(
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )
        set_telemetry(telemetry)
        telemetry.instrument_fastapi(app)
        database._ensure_engine()
        if database.engine is not None:
            telemetry.instrument_sqlalchemy(database.engine)
        logger.info("Telemetry initialized")

    yield

    # ---- Shutdown ----
    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)

    await database.dispose_engine()
