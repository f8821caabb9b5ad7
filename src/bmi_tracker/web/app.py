"""FastAPI application for the bmi-tracker web interface."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.templating import Jinja2Templates

from .. import __version__
from ..db.engine import get_db_path, init_db
from ..forms import FormError
from ..services.tracker import NotFoundError, TrackerError
from .routers import api, entries, pages

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - creates the schema on startup."""
    await init_db(app.state.db_path)
    yield


def create_app(db_path: Path | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="bmi-tracker",
        description="Personal height, weight and BMI tracking",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.db_path = db_path or get_db_path()
    app.state.templates = Jinja2Templates(directory=TEMPLATES_DIR)

    app.include_router(pages.router)
    app.include_router(entries.router)
    app.include_router(api.router)

    @app.exception_handler(NotFoundError)
    async def not_found(request: Request, exc: NotFoundError):
        return JSONResponse({"error": str(exc)}, status_code=404)

    @app.exception_handler(FormError)
    async def invalid_form(request: Request, exc: FormError):
        logger.warning("Rejected form input on %s: %s", request.url.path, exc)
        return JSONResponse({"error": str(exc)}, status_code=400)

    @app.exception_handler(TrackerError)
    async def tracker_error(request: Request, exc: TrackerError):
        return JSONResponse({"error": str(exc)}, status_code=400)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app

