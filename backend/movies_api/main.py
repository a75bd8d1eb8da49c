import logging
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine

from movies_api.routers import health, movies
from movies_api.core.config import Settings, get_settings
from movies_api.core.exceptions import InvalidInputException
from movies_api.db import Base, create_db_engine, create_session_factory, wait_for_db
from movies_api import models  # ensure models are imported

logger = logging.getLogger(__name__)

def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )

    app = FastAPI(
        title="Movies API",
        description="CRUD service for movies and their directors",
        version="1.0.0"
    )

    # The database handle is built here and reached through app.state only
    app.state.settings = settings
    app.state.engine = engine or create_db_engine(settings)
    app.state.session_factory = create_session_factory(app.state.engine)

    app.include_router(health.router)
    app.include_router(movies.router)

    @app.exception_handler(RequestValidationError)
    async def invalid_input_handler(request: Request, exc: RequestValidationError):
        logger.info(f"Invalid input on {request.method} {request.url.path}: {exc.errors()}")
        error = InvalidInputException()
        return JSONResponse(status_code=error.status_code, content=error.to_dict())

    @app.on_event("startup")
    def init_db():
        # Unreachable database at startup is fatal
        wait_for_db(app.state.engine, settings.DB_CONNECT_RETRIES, settings.DB_CONNECT_RETRY_DELAY)
        if settings.AUTO_CREATE_TABLES:
            Base.metadata.create_all(bind=app.state.engine)
            logger.info("Database tables created")

    @app.on_event("shutdown")
    def close_db():
        app.state.engine.dispose()

    return app

app = create_app()
