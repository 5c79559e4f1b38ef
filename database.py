import logging
from contextlib import contextmanager
from pathlib import Path
from alembic import command
from alembic.config import Config as AlembicConfig
from sqlalchemy import create_engine, event, inspect
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

Base = declarative_base()

# Bound to an engine by init_db() at application startup
SessionLocal = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False)

MIGRATIONS_DIR = Path(__file__).resolve().parent / 'migrations'

_engine = None


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def migration_config(database_url):
    """Alembic config for the bundled migrations, without reading alembic.ini."""
    cfg = AlembicConfig()
    cfg.set_main_option('script_location', str(MIGRATIONS_DIR))
    cfg.set_main_option('sqlalchemy.url', database_url.replace('%', '%%'))
    return cfg


def _run_migrations(engine, database_url):
    cfg = migration_config(database_url)
    with engine.begin() as connection:
        cfg.attributes['connection'] = connection
        tables = inspect(connection).get_table_names()
        if 'bookmarks' in tables and 'alembic_version' not in tables:
            # Created by create_all before migrations existed; the schema already matches
            logger.info("Stamping existing database at the current migration head")
            command.stamp(cfg, 'head')
        else:
            command.upgrade(cfg, 'head')


def init_db(database_url):
    """Create the engine, bind the session factory and migrate the schema to head."""
    global _engine

    # Register models on Base.metadata before migrating
    import models  # noqa: F401

    if _engine is not None:
        _engine.dispose()

    logger.info(f"Initializing database at {database_url}")
    connect_args = {}
    if database_url.startswith('sqlite'):
        # Flask may serve requests from worker threads
        connect_args['check_same_thread'] = False

    _engine = create_engine(database_url, connect_args=connect_args)
    if database_url.startswith('sqlite'):
        event.listen(_engine, 'connect', _enable_sqlite_foreign_keys)

    SessionLocal.configure(bind=_engine)
    _run_migrations(_engine, database_url)
    logger.info("Database tables are ready")
    return _engine


def get_engine():
    return _engine


def close_db():
    global _engine
    if _engine is not None:
        _engine.dispose()
        _engine = None
        logger.info("Database engine disposed")


@contextmanager
def get_db_session():
    """Provide a transactional scope around a series of SQLAlchemy operations."""
    if _engine is None:
        raise RuntimeError("Database is not initialized; call init_db() first")
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"SQLAlchemy Session Error: {e}")
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"General Session Error: {e}")
        raise
    finally:
        db.close()
