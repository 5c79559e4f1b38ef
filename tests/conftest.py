import json
import pytest

from config import BASE_DIR
from database import init_db, close_db
from utils.corpus import load_corpus, parse_corpus

BUNDLED_CORPUS = BASE_DIR / 'data' / 'kjv.json'

# Keeps tests away from any real AI credentials in the environment
NO_AI_CREDENTIALS = {
    'AI_PROVIDER': 'openai',
    'AI_API_KEY': '',
    'OPENAI_API_KEY': '',
    'ANTHROPIC_API_KEY': '',
    'GROQ_API_KEY': '',
    'GEMINI_API_KEY': '',
}


@pytest.fixture(scope='session')
def corpus():
    return load_corpus(BUNDLED_CORPUS)


def make_book(book_id, name, chapters, verses, testament='Old'):
    return {'id': book_id, 'name': name, 'testament': testament, 'chapters': chapters, 'verses': verses}


@pytest.fixture
def small_corpus():
    """Two books, with enough 'love' verses to hit the search cap."""
    love_chapter = {str(n): f"Verse {n} speaks of LOVE and mercy." for n in range(1, 61)}
    return parse_corpus({
        'translation': 'TEST',
        'books': [
            make_book(2, 'Second', 3, {'1': love_chapter}, testament='New'),
            make_book(1, 'First', 2, {
                '2': {'2': 'Beta two.', '1': 'Alpha love one.'},
                '1': {'10': 'Ten.', '9': 'Nine.', '1': 'One.'},
            }),
        ],
    })


@pytest.fixture
def corpus_file(tmp_path):
    def write(data):
        path = tmp_path / 'corpus.json'
        path.write_text(json.dumps(data), encoding='utf-8')
        return path
    return write


@pytest.fixture
def db(tmp_path):
    engine = init_db(f"sqlite:///{tmp_path / 'test.db'}")
    yield engine
    close_db()


@pytest.fixture
def app(tmp_path, corpus):
    from app import create_app

    overrides = {
        'TESTING': True,
        'DATABASE_URL': f"sqlite:///{tmp_path / 'app.db'}",
        **NO_AI_CREDENTIALS,
    }
    app = create_app(overrides, corpus=corpus)
    yield app
    close_db()


@pytest.fixture
def client(app):
    return app.test_client()
