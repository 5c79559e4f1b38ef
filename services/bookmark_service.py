# services/bookmark_service.py
import logging

from sqlalchemy.exc import IntegrityError

from database import get_db_session
from models import Bookmark
from schemas.bookmark_schemas import BookmarkCreate, BookmarkRead, BookmarkDetail

logger = logging.getLogger(__name__)


def _find_bookmark(data):
    with get_db_session() as db:
        existing = db.query(Bookmark).filter_by(
            book_id=data.book_id,
            chapter=data.chapter,
            verse=data.verse
        ).first()
        return BookmarkRead.model_validate(existing) if existing else None


def add_bookmark(book_id, chapter, verse):
    """Bookmark a verse. Returns (bookmark, created); duplicates return the existing row."""
    data = BookmarkCreate(book_id=book_id, chapter=chapter, verse=verse)

    existing = _find_bookmark(data)
    if existing:
        logger.info(f"Bookmark already exists for {data.book_id} {data.chapter}:{data.verse}")
        return existing, False

    try:
        with get_db_session() as db:
            bookmark = Bookmark(book_id=data.book_id, chapter=data.chapter, verse=data.verse)
            db.add(bookmark)
            db.flush()  # Assigns id and created_at
            logger.info(f"Created bookmark {bookmark.id} for {data.book_id} {data.chapter}:{data.verse}")
            return BookmarkRead.model_validate(bookmark), True
    except IntegrityError:
        # Another request inserted the same verse between the lookup and the insert
        existing = _find_bookmark(data)
        if existing is None:
            raise
        logger.info(f"Bookmark for {data.book_id} {data.chapter}:{data.verse} was created concurrently")
        return existing, False


def delete_bookmark(bookmark_id):
    """Remove a bookmark by id. Missing ids are a no-op; returns whether a row was removed."""
    with get_db_session() as db:
        bookmark = db.get(Bookmark, bookmark_id)
        if bookmark is None:
            return False
        db.delete(bookmark)
        logger.info(f"Deleted bookmark {bookmark_id}")
        return True


def list_bookmarks(corpus):
    """All bookmarks newest first, with book name and verse text joined from the corpus."""
    with get_db_session() as db:
        bookmarks = db.query(Bookmark).order_by(Bookmark.created_at.desc(), Bookmark.id.desc()).all()

        results = []
        for b in bookmarks:
            book = corpus.book(b.book_id)
            verse = corpus.verse(b.book_id, b.chapter, b.verse)
            results.append(BookmarkDetail(
                id=b.id,
                book_id=b.book_id,
                chapter=b.chapter,
                verse=b.verse,
                created_at=b.created_at,
                book_name=book.name if book else None,
                text=verse.text if verse else None
            ))
        return results
