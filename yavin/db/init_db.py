"""
Database initialization: wait for the server, then create tables.
"""
import logging
import time
from typing import Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError

from yavin.core.config import settings
from yavin.db.base import engine as default_engine
from yavin.models import Base

logger = logging.getLogger(__name__)


def wait_for_database(
    engine: Engine,
    retries: Optional[int] = None,
    delay: Optional[float] = None,
) -> None:
    """
    Block until the database answers a trivial query.

    Args:
        engine: Engine to probe
        retries: Number of attempts before giving up
        delay: Seconds to sleep between attempts

    Raises:
        OperationalError: If the database is still unreachable after all attempts
    """
    attempts = max(1, retries if retries is not None else settings.DB_CONNECT_RETRIES)
    pause = delay if delay is not None else settings.DB_RETRY_DELAY_SECONDS

    for attempt in range(1, attempts + 1):
        try:
            with engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            return
        except OperationalError as e:
            if attempt == attempts:
                logger.error(f"Database unreachable after {attempts} attempts: {e}")
                raise
            logger.warning(f"Database not ready (attempt {attempt}/{attempts}), retrying in {pause}s")
            time.sleep(pause)


def init_db(engine: Optional[Engine] = None) -> None:
    """
    Initialize database schema.

    Args:
        engine: Engine to use, defaults to the application engine
    """
    target = engine or default_engine
    wait_for_database(target)
    Base.metadata.create_all(bind=target)
    logger.info("Database tables ready")
