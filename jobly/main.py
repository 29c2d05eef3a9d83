# main.py
import logging
from pathlib import Path

from dotenv import load_dotenv

# Ensure repo-root .env is loaded for the running server process.
load_dotenv(dotenv_path=Path(__file__).resolve().parents[1] / ".env", override=False)

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from jobly.config import build_sqlalchemy_db_url, settings
from jobly.database import Base, engine
from jobly.models import Company, Job, User  # noqa: F401 - registers tables on Base.metadata
from jobly.api.routes.health import router as health_router
from jobly.routers import auth, companies, jobs


def create_app() -> FastAPI:
    logging.getLogger("jobly").setLevel(settings.log_level.upper())

    application = FastAPI(
        title=settings.app_name,
        version=settings.version,
        debug=settings.debug,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(health_router)
    application.include_router(auth.router, prefix="/auth", tags=["auth"])
    application.include_router(companies.router)
    application.include_router(jobs.router)

    # Schema migrations are managed outside the app; sqlite (local/test) gets tables on startup.
    db_url = build_sqlalchemy_db_url(settings)
    if db_url.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)
    return application


app = create_app()
