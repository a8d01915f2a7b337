import logging
import os
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from .config import settings
from .database import init_db
from .errors import GameError
from .globals import template_catalog
from .router import router

logger = logging.getLogger(__name__)


# --- Logging Setup ---
def setup_logging():
    logger = logging.getLogger("gamekit")
    logger.setLevel(logging.DEBUG if settings.DEBUG else logging.INFO)

    if not os.path.exists(settings.LOG_DIR):
        os.makedirs(settings.LOG_DIR, exist_ok=True)
    log_path = os.path.join(settings.LOG_DIR, settings.LOG_FILE)
    if not any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        file_handler = RotatingFileHandler(log_path, maxBytes=5_000_000, backupCount=3)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(levelname)s - %(name)s - %(message)s")
        )
        logger.addHandler(file_handler)
    # Also configure root logger to see logs from other libraries
    logging.basicConfig(level=logging.INFO)


# --- Lifecycle ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    template_catalog.load_all()
    yield


# --- Error Handlers ---
async def handle_game_error(request: Request, exc: GameError):
    if exc.status_code >= 500:
        logger.error(f"{request.url.path}: {exc.message}")
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


async def handle_validation_error(request: Request, exc: Exception):
    # request-body errors and payload errors share one shape
    details = [
        {key: value for key, value in error.items() if key not in ("url", "ctx")}
        for error in exc.errors()
    ]
    return JSONResponse(
        {"error": "Invalid request data", "details": jsonable_encoder(details)},
        status_code=422,
    )


# --- App Factory ---
def create_app() -> FastAPI:
    setup_logging()
    app = FastAPI(
        title=settings.PROJECT_NAME,
        debug=settings.DEBUG,
        lifespan=lifespan,
        root_path=settings.ROOT_PATH,
    )

    app.add_exception_handler(GameError, handle_game_error)
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.include_router(router)

    return app
