# services/bible_service.py
import logging
import random

from utils.search import BibleSearchEngine, DEFAULT_LIMIT, DEFAULT_MIN_QUERY_LENGTH

logger = logging.getLogger(__name__)

DAILY_VERSE_KEYWORD = 'love'


class BibleService:
    """Read-only queries over the in-memory corpus."""

    def __init__(self, corpus, search_limit=DEFAULT_LIMIT, min_query_length=DEFAULT_MIN_QUERY_LENGTH, rng=None):
        self.corpus = corpus
        self.search_engine = BibleSearchEngine(corpus, limit=search_limit, min_query_length=min_query_length)
        self._rng = rng or random.Random()

    def list_books(self):
        return list(self.corpus.books)

    def get_book(self, book_id):
        return self.corpus.book(book_id)

    def find_book(self, name):
        return self.corpus.book_by_name(name)

    def get_chapters(self, book_id):
        book = self.corpus.book(book_id)
        if book is None:
            return []
        return list(range(1, book.chapters + 1))

    def get_chapter(self, book_id, chapter):
        """Verses of one chapter in verse order; empty when out of range."""
        return self.corpus.chapter(book_id, chapter)

    def get_verse(self, book_id, chapter, verse):
        return self.corpus.verse(book_id, chapter, verse)

    def search_verses(self, keyword):
        return self.search_engine.search(keyword)

    def daily_verse(self, keyword=DAILY_VERSE_KEYWORD):
        candidates = self.search_verses(keyword)
        if not candidates:
            logger.warning(f"No verses matched daily verse keyword {keyword!r}")
            return None
        return self._rng.choice(candidates)
