from logging.config import fileConfig

from sqlalchemy import engine_from_config
from sqlalchemy import pool

from alembic import context

# Import Base and all models so they are registered on Base.metadata
from config import Config as AppConfig
from database import Base
import models  # noqa: F401

# this is the Alembic Config object, which provides
# access to the values within the .ini file in use.
config = context.config

# Only the alembic command line loads logging from alembic.ini; init_db() leaves app logging alone
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def _database_url():
    return config.get_main_option("sqlalchemy.url") or AppConfig.DATABASE_URL


def _configure(is_sqlite, **kwargs):
    context.configure(
        target_metadata=target_metadata,
        # SQLite can only alter tables by copying them
        render_as_batch=is_sqlite,
        **kwargs,
    )


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode.

    Emits the SQL to the script output instead of running it.
    """
    url = _database_url()
    _configure(
        url.startswith('sqlite'),
        url=url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode.

    init_db() hands over its own connection through ``config.attributes``;
    the alembic command line builds an engine from the configured URL.
    """
    connection = config.attributes.get('connection')
    if connection is not None:
        _configure(connection.dialect.name == 'sqlite', connection=connection)
        with context.begin_transaction():
            context.run_migrations()
        return

    ini_config = config.get_section(config.config_ini_section, {})
    ini_config['sqlalchemy.url'] = _database_url()

    connectable = engine_from_config(
        ini_config,
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        _configure(connection.dialect.name == 'sqlite', connection=connection)

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
