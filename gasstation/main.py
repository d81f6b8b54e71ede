from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gasstation.api.deps import get_write_dispatcher
from gasstation.api.routers.gas_estimates import router as gas_estimates_router
from gasstation.infrastructure.db.engine import create_schema, get_engine
from gasstation.shared.config import get_settings
from gasstation.shared.logging import configure_logging


@asynccontextmanager
async def lifespan(_app: FastAPI):
    settings = get_settings()
    configure_logging(settings.log_level)
    create_schema(get_engine(settings.database_url))
    yield
    get_write_dispatcher().shutdown(wait=True)
    get_write_dispatcher.cache_clear()


app = FastAPI(title="Gas Station Estimates API", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origin_regex=get_settings().cors_allow_origin_regex,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)
app.include_router(gas_estimates_router)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
