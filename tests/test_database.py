from alembic.script import ScriptDirectory
from sqlalchemy import create_engine, inspect, text

from database import Base, close_db, get_db_session, init_db, migration_config
from models import Bookmark


def _head(url):
    return ScriptDirectory.from_config(migration_config(url)).get_current_head()


def _current_revision(engine):
    with engine.connect() as connection:
        return connection.execute(text("SELECT version_num FROM alembic_version")).scalar_one()


def test_init_db_migrates_to_head(tmp_path):
    url = f"sqlite:///{tmp_path / 'fresh.db'}"
    engine = init_db(url)
    try:
        tables = set(inspect(engine).get_table_names())
        assert {'bookmarks', 'chat_messages', 'settings', 'alembic_version'} <= tables
        assert _current_revision(engine) == _head(url)

        constraints = inspect(engine).get_unique_constraints('bookmarks')
        assert [c['column_names'] for c in constraints] == [['book_id', 'chapter', 'verse']]
    finally:
        close_db()


def test_init_db_twice_keeps_data(tmp_path):
    url = f"sqlite:///{tmp_path / 'twice.db'}"
    init_db(url)
    with get_db_session() as db:
        db.add(Bookmark(book_id=19, chapter=23, verse=1))

    engine = init_db(url)
    try:
        assert _current_revision(engine) == _head(url)
        with get_db_session() as db:
            assert db.query(Bookmark).count() == 1
    finally:
        close_db()


def test_database_created_without_migrations_is_stamped(tmp_path):
    url = f"sqlite:///{tmp_path / 'legacy.db'}"
    legacy = create_engine(url)
    Base.metadata.create_all(bind=legacy)
    legacy.dispose()

    engine = init_db(url)
    try:
        assert _current_revision(engine) == _head(url)
    finally:
        close_db()
