"""FastAPI application entrypoint. No business logic; only wiring, logging and startup hooks."""

from dotenv import load_dotenv

load_dotenv()

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1 import router as v1_router
from app.core.config import settings
from app.core.database import session_scope
from app.repositories.user import UserRepository
from app.services.admin_seed import seed_admin_if_needed

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def run_startup_seed() -> None:
    """Ensure the admin account exists. Never raises: startup continues without an admin."""
    try:
        with session_scope() as db:
            outcome = seed_admin_if_needed(UserRepository(db), settings)
        logger.info("Admin seed finished: %s", outcome.value)
    except Exception:
        logger.exception("Admin seed could not open a database session")


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    run_startup_seed()
    yield


app = FastAPI(
    title="MediQ User Service",
    description="Accounts, roles and JWT authentication for MediQ.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(v1_router, prefix=settings.API_V1_PREFIX)


@app.get("/")
def root() -> dict[str, str]:
    """Root route; minimal payload for discovery."""
    return {"message": "MediQ User Service"}
