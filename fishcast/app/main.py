# fishcast/app/main.py
# Fishing-conditions prediction and catch logging for the waters off Northland, NZ.
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from fishcast.app.api.routes import api_router
from fishcast.app.core.config import ENABLE_SCHEDULER, LOG_LEVEL
from fishcast.app.db.init_db import init_db
from fishcast.app.services.scheduling.scheduler import create_scheduler, stop_scheduler

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting fishcast API")
    init_db()

    scheduler = None
    if ENABLE_SCHEDULER:
        scheduler = create_scheduler()
        scheduler.start()
        logger.info("Environmental refresh scheduled")
    app.state.scheduler = scheduler

    yield

    stop_scheduler(scheduler)
    logger.info("fishcast API stopped")


app = FastAPI(title="fishcast - NZ Fishing Predictor API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed or missing input is a 400, reported before any store access."""
    errors = exc.errors()
    fields = sorted({str(error["loc"][-1]) for error in errors if error.get("loc")})
    detail = f"Missing or invalid fields: {', '.join(fields)}" if fields else "Invalid request"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": detail, "errors": jsonable_encoder(errors)},
    )


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Database error"},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Something went wrong"},
    )


app.include_router(api_router)


@app.get("/")
async def root():
    return {"message": "Welcome to the fishcast API"}


@app.get("/health")
async def health_check():
    return {"status": "ok", "message": "fishcast API is up and running!"}
