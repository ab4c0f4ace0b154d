# backend/database.py
import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from config import settings

logger = logging.getLogger(__name__)


def build_database_url():
    # 1. An explicit DATABASE_URL wins (tests, local SQLite runs)
    if settings.DATABASE_URL:
        return settings.DATABASE_URL

    # 2. Otherwise assemble the MySQL URL from the DB_* settings
    return URL.create(
        "mysql+pymysql",
        username=settings.DB_USER,
        password=settings.DB_PASSWORD,
        host=settings.DB_HOST,
        port=settings.DB_PORT,
        database=settings.DB_NAME,
    )


SQLALCHEMY_DATABASE_URL = build_database_url()

# 3. Pool configuration depends on the backend
if str(SQLALCHEMY_DATABASE_URL).startswith("sqlite"):
    engine_args = {"connect_args": {"check_same_thread": False}}  # Only for SQLite
else:
    # Hard cap of DB_POOL_SIZE connections, waiters queue without limit
    engine_args = {
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": 0,
        "pool_timeout": settings.DB_POOL_TIMEOUT,
    }

engine = create_engine(SQLALCHEMY_DATABASE_URL, **engine_args)
logger.info(
    "Database engine configured for %s (pool size %s)",
    engine.url.render_as_string(hide_password=True),
    settings.DB_POOL_SIZE,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def get_engine() -> Engine:
    return engine


def check_connection(bind: Engine) -> bool:
    """Borrow one pooled connection, run ``SELECT 1`` and hand it back.

    Never raises: an unreachable database is reported as ``False``.
    """
    try:
        with bind.connect() as connection:
            connection.execute(text("SELECT 1"))
        logger.info("Database connection established")
        return True
    except SQLAlchemyError as e:
        logger.error(f"Database connection failed: {e}")
        return False


def commit_or_rollback(db: Session) -> None:
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Database write failed: {e}")
        raise


def dispose_engine() -> None:
    """Close all connections held by the pool."""
    engine.dispose()
    logger.info("Database connection pool closed")
