import logging
import time
from typing import Iterator
from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker, declarative_base

from movies_api.core.config import Settings

logger = logging.getLogger(__name__)

Base = declarative_base()

def create_db_engine(settings: Settings) -> Engine:
    """Build the engine; every connection carries the configured deadlines"""
    url = make_url(settings.DATABASE_URL)

    if url.get_backend_name() == "sqlite":
        return create_engine(
            url,
            connect_args={"check_same_thread": False, "timeout": settings.DB_CONNECT_TIMEOUT},
        )

    connect_args = {}
    if url.get_backend_name() == "postgresql":
        connect_args = {
            "connect_timeout": settings.DB_CONNECT_TIMEOUT,
            "options": f"-c statement_timeout={settings.DB_STATEMENT_TIMEOUT_MS}",
        }

    return create_engine(
        url,
        pool_pre_ping=True,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        connect_args=connect_args,
    )

def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)

def check_connection(engine: Engine) -> None:
    """Run a trivial query; raises if the database is unreachable"""
    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))

def wait_for_db(engine: Engine, retries: int, delay: float) -> None:
    retries = max(retries, 1)
    for attempt in range(1, retries + 1):
        try:
            logger.info(f"Attempt {attempt}/{retries}: connecting to database...")
            check_connection(engine)
            logger.info("Successfully connected to database")
            return
        except Exception as e:
            logger.error(f"Connection failed: {type(e).__name__}: {str(e)}")
            if attempt == retries:
                raise RuntimeError(f"Could not connect to the database after {retries} attempts") from e
            time.sleep(delay)

def get_db(request: Request) -> Iterator[Session]:
    """Dependency to get database session"""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
