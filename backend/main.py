"""
FastAPI Application Entry Point
"""
from contextlib import asynccontextmanager
import logging
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from habit_tracker.core.config import settings
from habit_tracker.core.constants import INVALID_REQUEST_MESSAGE
from habit_tracker.core.dependencies import habit_repository
from habit_tracker.routes import habits, health
from habit_tracker.services.scheduler import start_scheduler, stop_scheduler

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

# Silence noisy third-party loggers
logging.getLogger('apscheduler.scheduler').setLevel(logging.WARNING)
logging.getLogger('apscheduler.executors').setLevel(logging.WARNING)
logging.getLogger('apscheduler.executors.default').setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager for startup/shutdown events
    """
    # Startup
    try:
        start_scheduler(habit_repository)
        logger.info("✓ Daily reminder scheduler started")
    except Exception as e:
        logger.warning(f"Could not start scheduler: {e}")

    logger.info(f"Server is running on http://localhost:{settings.PORT}")

    yield

    # Shutdown
    try:
        stop_scheduler()
        logger.info("✓ Daily reminder scheduler stopped")
    except Exception as e:
        logger.warning(f"Error stopping scheduler: {e}")


# Initialize FastAPI app with lifespan
app = FastAPI(
    title="Habit Tracker API",
    version="0.1.0",
    lifespan=lifespan
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors in the {status, error} envelope"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"status": "error", "error": exc.detail}
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Reject malformed request bodies with 400"""
    logger.warning(f"Rejected request to {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={"status": "error", "error": INVALID_REQUEST_MESSAGE}
    )


# Register routes
app.include_router(health.router)
app.include_router(habits.router)


if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
