# utils/corpus.py
"""Bundled Bible corpus loader.

The corpus is a nested book -> chapter -> verse JSON document that ships with
the app. It is parsed once per process into plain in-memory indexes; nothing
about it is ever written to the database.
"""
import json
import logging
from pathlib import Path

from models.bible import Book, Verse, OLD_TESTAMENT, NEW_TESTAMENT

logger = logging.getLogger(__name__)

_corpus_instance = None


class CorpusLoadError(Exception):
    """Raised when the bundled corpus cannot be read or is malformed."""


class BibleCorpus:
    def __init__(self, books, verses, translation='KJV'):
        self.translation = translation
        self.books = sorted(books, key=lambda b: b.id)
        self.verses = list(verses)  # Corpus order

        self._books_by_id = {b.id: b for b in self.books}
        self._books_by_name = {b.name.lower(): b for b in self.books}
        self._chapters = {}
        self._verses_by_ref = {}
        for v in self.verses:
            self._chapters.setdefault((v.book_id, v.chapter), []).append(v)
            self._verses_by_ref[(v.book_id, v.chapter, v.verse)] = v
        for chapter_verses in self._chapters.values():
            chapter_verses.sort(key=lambda v: v.verse)

        # Lower-cased text, aligned with self.verses, for substring search
        self.search_index = [v.text.lower() for v in self.verses]

    def __len__(self):
        return len(self.verses)

    def book(self, book_id):
        return self._books_by_id.get(book_id)

    def book_by_name(self, name):
        if not name:
            return None
        return self._books_by_name.get(name.strip().lower())

    def chapter(self, book_id, chapter):
        return list(self._chapters.get((book_id, chapter), []))

    def verse(self, book_id, chapter, verse):
        return self._verses_by_ref.get((book_id, chapter, verse))


def _parse_int_key(value, what, book_name):
    try:
        return int(value)
    except (TypeError, ValueError):
        raise CorpusLoadError(f"Invalid {what} number {value!r} in {book_name}")


def parse_corpus(data):
    """Build a BibleCorpus from an already-decoded corpus document."""
    if not isinstance(data, dict) or not isinstance(data.get('books'), list):
        raise CorpusLoadError("Corpus document must be an object with a 'books' list")

    books = []
    verses = []
    seen_ids = set()

    for entry in data['books']:
        try:
            book_id = int(entry['id'])
            name = str(entry['name'])
            testament = entry['testament']
            chapter_count = int(entry['chapters'])
            chapter_map = entry.get('verses', {})
        except (KeyError, TypeError, ValueError) as e:
            raise CorpusLoadError(f"Malformed book entry {entry!r}: {e}")

        if testament not in (OLD_TESTAMENT, NEW_TESTAMENT):
            raise CorpusLoadError(f"Unknown testament {testament!r} for {name}")
        if book_id in seen_ids:
            raise CorpusLoadError(f"Duplicate book id {book_id} ({name})")
        if not isinstance(chapter_map, dict):
            raise CorpusLoadError(f"Verses of {name} must be a chapter -> verse object")
        seen_ids.add(book_id)
        books.append(Book(id=book_id, name=name, testament=testament, chapters=chapter_count))

        seen_chapters = set()
        for chapter_key in sorted(chapter_map, key=lambda k: _parse_int_key(k, 'chapter', name)):
            chapter_num = _parse_int_key(chapter_key, 'chapter', name)
            if chapter_num in seen_chapters:
                raise CorpusLoadError(f"Duplicate chapter {chapter_num} in {name}")
            seen_chapters.add(chapter_num)
            verse_map = chapter_map[chapter_key]
            if not isinstance(verse_map, dict):
                raise CorpusLoadError(f"Chapter {name} {chapter_key} must be a verse -> text object")
            seen_verses = set()
            for verse_key in sorted(verse_map, key=lambda k: _parse_int_key(k, 'verse', name)):
                text = verse_map[verse_key]
                if not isinstance(text, str):
                    raise CorpusLoadError(f"Verse text for {name} {chapter_key}:{verse_key} must be a string")
                verse_num = _parse_int_key(verse_key, 'verse', name)
                if verse_num in seen_verses:
                    raise CorpusLoadError(f"Duplicate verse {name} {chapter_num}:{verse_num}")
                seen_verses.add(verse_num)
                verses.append((book_id, name, chapter_num, verse_num, text.strip()))

    # Verses are numbered in canonical book order regardless of file order
    verses.sort(key=lambda v: (v[0], v[2], v[3]))
    verses = [
        Verse(id=i, book_id=book_id, book_name=name, chapter=chapter, verse=verse, text=text)
        for i, (book_id, name, chapter, verse, text) in enumerate(verses, start=1)
    ]
    return BibleCorpus(books, verses, translation=data.get('translation', 'KJV'))


def load_corpus(path):
    """Read and index the corpus file at ``path``."""
    path = Path(path)
    logger.info(f"Loading Bible corpus from {path}")
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        raise CorpusLoadError(f"Corpus file not found: {path}")
    except (OSError, json.JSONDecodeError) as e:
        raise CorpusLoadError(f"Could not read corpus file {path}: {e}")

    corpus = parse_corpus(data)
    logger.info(f"Loaded {len(corpus.books)} books and {len(corpus)} verses ({corpus.translation})")
    return corpus


def get_corpus(path=None):
    """Return the process-wide corpus, loading it on first use."""
    global _corpus_instance
    if _corpus_instance is None:
        if path is None:
            from config import Config
            path = Config.BIBLE_DATA_PATH
        _corpus_instance = load_corpus(path)
    return _corpus_instance


def reset_corpus():
    global _corpus_instance
    _corpus_instance = None
