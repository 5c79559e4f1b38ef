# utils/search.py
import logging

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 50
DEFAULT_MIN_QUERY_LENGTH = 2


class BibleSearchEngine:
    def __init__(self, corpus, limit=DEFAULT_LIMIT, min_query_length=DEFAULT_MIN_QUERY_LENGTH):
        self.corpus = corpus
        self.limit = limit
        self.min_query_length = min_query_length

    def normalize(self, query):
        """Trim and lowercase a query; None if it is too short to search."""
        if not query:
            return None
        query = query.strip().lower()
        if len(query) < self.min_query_length:
            return None
        return query

    def text_search(self, query, limit=None):
        """Case-insensitive substring scan over every verse, in corpus order"""
        limit = self.limit if limit is None else min(limit, self.limit)
        needle = self.normalize(query)
        if needle is None or limit <= 0:
            return []

        results = []
        for verse, text in zip(self.corpus.verses, self.corpus.search_index):
            if needle in text:
                results.append(verse)
                if len(results) >= limit:
                    break

        logger.debug(f"Search for {needle!r} matched {len(results)} verses")
        return results

    def search(self, query, limit=None):
        """Main search method"""
        return self.text_search(query, limit)
