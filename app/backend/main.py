# app/backend/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlmodel import Session

from app.core.config import settings
from app.core.logging_config import setup_logging
from app.db.session import create_all_tables, get_session

# model import registers the table on SQLModel.metadata
from app.backend.models import task as _m_task  # noqa: F401

from app.backend.routers import task

setup_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    if settings.auto_create_tables:
        create_all_tables()
        logger.info("tables created (AUTO_CREATE_TABLES)")
    yield


app = FastAPI(
    title="Taskify API",
    version=settings.app_version,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # malformed bodies are client input failures like any other validation error
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
    else:
        message = "Invalid request"
    logger.info("%s %s rejected: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content={"detail": message})


app.include_router(task.router)


@app.get("/")
def root():
    return {"service": "Taskify API", "status": "running"}


@app.get("/health")
def health_app():
    return {"ok": True}


@app.get("/health/db")
def health_db(db: Session = Depends(get_session)):
    # Migration is a deployment concern. Runtime only verifies DB connectivity.
    try:
        db.execute(text("SELECT 1"))
        return {"ok": True}
    except Exception:
        logger.exception("database health check failed")
        raise HTTPException(status_code=500, detail="Database connection failed")
