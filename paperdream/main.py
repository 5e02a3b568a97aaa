import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import version as pkg_version
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from paperdream.api import (
    assistant_router,
    cards_router,
    design_router,
    games_router,
    health_router,
    render_router,
    uploads_router,
)
from paperdream.config import settings
from paperdream.db.database import init_db
from paperdream.models.failure import KnownError
from paperdream.services.uploads import UPLOAD_URL_PREFIX

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    Path(settings.upload_dir).mkdir(parents=True, exist_ok=True)
    await init_db()
    yield


app = FastAPI(
    title=settings.app_name,
    version=pkg_version("paperdream"),
    lifespan=lifespan,
)


@app.exception_handler(KnownError)
async def known_error_handler(request: Request, exc: KnownError) -> JSONResponse:
    logger.warning(
        "%s %s failed: %s (%s)",
        request.method,
        request.url.path,
        exc.kind.value,
        exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_content())


app.include_router(assistant_router)
app.include_router(cards_router)
app.include_router(design_router)
app.include_router(games_router)
app.include_router(health_router)
app.include_router(render_router)
app.include_router(uploads_router)

app.mount(
    UPLOAD_URL_PREFIX,
    StaticFiles(directory=settings.upload_dir, check_dir=False),
    name="uploads",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Tighten in production
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
