import pytest
from pydantic import ValidationError

from database import get_db_session
from models import Bookmark
from services import bookmark_service


def test_add_bookmark_is_idempotent(db):
    first, created = bookmark_service.add_bookmark(19, 23, 1)
    second, created_again = bookmark_service.add_bookmark(19, 23, 1)

    assert created is True
    assert created_again is False
    assert first.id == second.id
    with get_db_session() as session:
        assert session.query(Bookmark).count() == 1


def test_add_bookmark_returns_row_inserted_concurrently(db, monkeypatch):
    first, _ = bookmark_service.add_bookmark(19, 23, 1)

    real_find = bookmark_service._find_bookmark
    lookups = []

    def stale_then_real(data):
        # The first lookup misses, as if another thread inserted right after it
        lookups.append(data)
        return None if len(lookups) == 1 else real_find(data)

    monkeypatch.setattr(bookmark_service, '_find_bookmark', stale_then_real)
    second, created = bookmark_service.add_bookmark(19, 23, 1)

    assert created is False
    assert second.id == first.id
    assert len(lookups) == 2
    with get_db_session() as session:
        assert session.query(Bookmark).count() == 1


def test_delete_bookmark(db):
    bookmark, _ = bookmark_service.add_bookmark(43, 3, 16)
    assert bookmark_service.delete_bookmark(bookmark.id) is True
    assert bookmark_service.delete_bookmark(bookmark.id) is False
    assert bookmark_service.delete_bookmark(12345) is False


def test_list_bookmarks_newest_first_with_corpus_text(db, corpus):
    older, _ = bookmark_service.add_bookmark(43, 3, 16)
    newer, _ = bookmark_service.add_bookmark(19, 23, 1)

    bookmarks = bookmark_service.list_bookmarks(corpus)
    assert [b.id for b in bookmarks] == [newer.id, older.id]
    assert bookmarks[0].book_name == 'Psalms'
    assert bookmarks[0].text == "The Lord is my shepherd, I lack nothing."
    assert bookmarks[1].book_name == 'John'


def test_list_bookmarks_keeps_verses_missing_from_corpus(db, corpus):
    bookmark_service.add_bookmark(7, 1, 1)  # Judges carries no text in the bundled corpus

    [bookmark] = bookmark_service.list_bookmarks(corpus)
    assert bookmark.book_name == 'Judges'
    assert bookmark.text is None


@pytest.mark.parametrize('book_id, chapter, verse', [(0, 1, 1), (67, 1, 1), (1, 0, 1), (1, 1, -3), (1, '1', 1)])
def test_add_bookmark_rejects_invalid_reference(db, book_id, chapter, verse):
    with pytest.raises(ValidationError):
        bookmark_service.add_bookmark(book_id, chapter, verse)
