from contextlib import asynccontextmanager

from collabmate.core.exceptions import CollabMateError, collabmate_error_handler
from collabmate.core.logging import configure_logging, get_logger
from collabmate.core.middleware import RequestLoggingMiddleware
from collabmate.core.rate_limit import limiter
from collabmate.core.settings import settings
from collabmate.db import Base, dispose_engine, engine, get_db, get_db_path
from collabmate.routers import applications, auth, notifications, projects, skill_swaps
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

# Configure structured logging at module load
configure_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for FastAPI application.
    The store is opened here and released on shutdown.
    """
    import collabmate.models  # noqa: F401 - ensure models are imported for metadata

    logger.info("application_starting", environment=settings.environment)
    db_path = get_db_path()
    if db_path:
        logger.info("using_sqlite_database", path=db_path)
    else:
        logger.info("using_database", url=engine.url.render_as_string(hide_password=True))
    Base.metadata.create_all(bind=engine)
    logger.info("database_tables_created")

    yield

    dispose_engine()
    logger.info("application_shutdown")


app = FastAPI(title="CollabMate Backend", version="0.1.0", lifespan=lifespan)

# ============================================================================
# CORS Middleware Configuration
# ============================================================================
ALLOWED_METHODS = ["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"]
ALLOWED_HEADERS = ["Content-Type", "Authorization", "Accept", "Origin"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=True,
    allow_methods=ALLOWED_METHODS,
    allow_headers=ALLOWED_HEADERS,
)

# ============================================================================
# Rate Limiting Middleware (SlowAPI)
# ============================================================================
app.state.limiter = limiter
app.add_middleware(SlowAPIMiddleware)

# ============================================================================
# Request Logging Middleware (must be added after other middleware)
# ============================================================================
app.add_middleware(RequestLoggingMiddleware)

app.add_exception_handler(CollabMateError, collabmate_error_handler)


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request, exc):
    return JSONResponse(
        status_code=429,
        content={"detail": f"Rate limit exceeded. {exc.detail}", "code": "rate_limited"},
    )


@app.get("/health")
def health_check():
    """Basic health check endpoint."""
    return {"status": "ok", "service": "collabmate-backend"}


@app.get("/health/ready")
def readiness_check(db=Depends(get_db)):
    """
    Readiness check - verifies database connectivity.
    Used by container orchestration for readiness probes.
    """
    try:
        db.execute(text("SELECT 1"))
        return {"status": "ready", "database": "connected"}
    except SQLAlchemyError as e:
        logger.warning("readiness_check_failed", error=str(e))
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "database": "disconnected"},
        )


app.include_router(auth.router)
app.include_router(projects.router)
app.include_router(applications.router)
app.include_router(skill_swaps.router)
app.include_router(notifications.router)
