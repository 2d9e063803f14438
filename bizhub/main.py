import logging
import time

from fastapi import FastAPI, Request

from bizhub.config import Settings, get_settings
from bizhub.core.logging import setup_logging
from bizhub.database import Base, engine
from bizhub.models import import_all_models
from bizhub.routers import (
    customers_router,
    health_router,
    inventory_router,
    notifications_router,
    products_router,
    tasks_router,
)
from bizhub.routers.common import operation_name

setup_logging()
settings: Settings = get_settings()
logger = logging.getLogger(__name__)

import_all_models()
Base.metadata.create_all(bind=engine)

app = FastAPI(title=settings.APP_NAME)


@app.middleware("http")
async def log_rpc_calls(request: Request, call_next):
    operation = operation_name(request.url.path)
    if operation is None:
        return await call_next(request)

    started = time.perf_counter()
    response = await call_next(request)
    duration_ms = round((time.perf_counter() - started) * 1000, 2)
    logger.info(
        "rpc %s -> %s",
        operation,
        response.status_code,
        extra={
            "operation": operation,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
        },
    )
    return response


app.include_router(health_router)
app.include_router(tasks_router)
app.include_router(products_router)
app.include_router(inventory_router)
app.include_router(customers_router)
app.include_router(notifications_router)

logger.info("%s ready (environment=%s)", settings.APP_NAME, settings.ENVIRONMENT)


__all__ = ["app"]
