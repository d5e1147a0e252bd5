import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from jobboard import __version__
from jobboard.config import APP_NAME, Settings, configure_logging, load_settings
from jobboard.engine import search_engine
from jobboard.engine.pagination import paginate
from jobboard.schemas import JobPage

load_dotenv()

logger = logging.getLogger(APP_NAME)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.log_level)
        logger.info("Starting job board (sources: %s)", ", ".join(settings.sources))

        # Jobs are loaded before the first request is served
        jobs = search_engine.get_jobs(settings)
        if not jobs:
            logger.warning("No jobs loaded at startup; pages will be empty until the next fetch")

        yield

        logger.info("Stopping job board")

    app = FastAPI(
        title="Remote Job Board",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # -------------------------
    # Health
    # -------------------------
    @app.get("/health")
    def health():
        return {
            "status": "ok",
            "jobs_loaded": len(search_engine.get_jobs(app.state.settings)),
        }

    # -------------------------
    # HTML listing
    # -------------------------
    @app.get("/", response_class=HTMLResponse)
    def index(request: Request, page: Optional[str] = None):
        jobs = search_engine.get_jobs(app.state.settings)
        result = paginate(jobs, page, app.state.settings.page_size)

        return templates.TemplateResponse(
            request,
            "jobs.html",
            {
                "jobs": result.items,
                "page": result.page,
                "page_count": result.page_count,
                "has_prev": result.has_prev,
                "has_next": result.has_next,
            },
        )

    # -------------------------
    # JSON listing
    # -------------------------
    @app.get("/api/jobs", response_model=JobPage)
    def list_jobs(page: Optional[str] = None):
        jobs = search_engine.get_jobs(app.state.settings)
        page_size = app.state.settings.page_size
        result = paginate(jobs, page, page_size)

        return {
            "items": result.items,
            "page": result.page,
            "page_count": result.page_count,
            "page_size": page_size,
            "total": len(jobs),
            "has_prev": result.has_prev,
            "has_next": result.has_next,
        }

    return app


app = create_app()
