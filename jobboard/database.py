import logging

from sqlalchemy import JSON, create_engine, inspect
from sqlalchemy.dialects.postgresql import JSONB, insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.orm import Session, sessionmaker, declarative_base

from jobboard.config import settings

logger = logging.getLogger(__name__)

engine = create_engine(
    settings.database_url,
    pool_pre_ping=True,
)


SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

# JSONB on Postgres, plain JSON for SQLite (local runs and tests).
JSONType = JSON().with_variant(JSONB(), "postgresql")


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def upsert_insert(db: Session, model):
    """Dialect-specific INSERT that supports ON CONFLICT clauses."""
    if db.get_bind().dialect.name == "sqlite":
        return sqlite_insert(model)
    return pg_insert(model)


def init_db():
    from jobboard.models import (  # noqa: F401
        User,
        Company,
        Job,
        Application,
        SavedJob,
        JobAlert,
        Resume,
        ExternalJobSource,
    )

    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Database initialized")
    except Exception as e:
        logger.exception("Database initialization failed: %s", e)
        raise


def missing_tables() -> list[str]:
    """Model tables that do not exist in the database yet."""
    import jobboard.models  # noqa: F401

    existing = set(inspect(engine).get_table_names())
    return sorted(set(Base.metadata.tables.keys()) - existing)


def ensure_tables_exist() -> list[str]:
    """Create any missing tables without touching existing data. Returns the created table names."""
    try:
        created = missing_tables()
        # create_all skips tables that already exist.
        Base.metadata.create_all(bind=engine)
    except Exception as e:
        logger.exception("Ensure tables failed: %s", e)
        raise
    if created:
        logger.info("Created missing DB tables: %s", ", ".join(created))
    else:
        logger.info("All DB tables already exist; no schema changes applied.")
    return created
