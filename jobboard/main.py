import logging

from fastapi import FastAPI, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from jobboard.config import settings
from jobboard.database import init_db, engine
from jobboard.logging_config import setup_logging
from jobboard.routers import (
    applications,
    auth,
    companies,
    dashboard,
    job_alerts,
    jobs,
    resumes,
    saved_jobs,
    sync,
)

setup_logging()
logger = logging.getLogger(__name__)

PLACEHOLDER_SECRET_KEY = "replace-with-a-long-random-secret-key"

app = FastAPI(
    title="JobBoard API",
    description="Job listings, applications, saved jobs, alerts and resumes.",
    version="1.0.0",
)

cors_origins = [o.strip() for o in settings.cors_allow_origins.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(dashboard.router)
app.include_router(jobs.router)
app.include_router(applications.router)
app.include_router(saved_jobs.router)
app.include_router(job_alerts.router)
app.include_router(companies.router)
app.include_router(resumes.router)
app.include_router(sync.router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request, exc):
    logger.info("Validation failed on %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request, exc):
    logger.exception("Unhandled server error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.get("/health/live")
def health_live():
    return {"status": "ok"}


@app.get("/health/ready")
def health_ready():
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return {"status": "ready"}
    except Exception:
        logger.exception("Readiness check failed")
        return JSONResponse(status_code=503, content={"status": "not_ready"})


@app.on_event("startup")
def on_startup():
    logger.info("Starting JobBoard API")
    env = (settings.app_env or "development").lower()
    if env in {"production", "prod"}:
        if settings.secret_key == PLACEHOLDER_SECRET_KEY:
            raise RuntimeError("SECRET_KEY placeholder is not allowed in production")
        if "username:password@" in settings.database_url:
            raise RuntimeError("DATABASE_URL placeholder credentials are not allowed in production")
        if settings.database_url.startswith("sqlite"):
            raise RuntimeError("SQLite is not supported in production; set a PostgreSQL DATABASE_URL")
    else:
        if settings.secret_key == PLACEHOLDER_SECRET_KEY:
            logger.warning("SECRET_KEY is using placeholder default. Set SECRET_KEY in .env for secure deployments.")
        if "username:password@" in settings.database_url:
            logger.warning("DATABASE_URL appears to use placeholder credentials. Set DATABASE_URL in .env.")
    init_db()


@app.get("/")
def root():
    return {"message": "JobBoard API. See /docs for the available endpoints."}
