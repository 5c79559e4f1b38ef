import random

import pytest

from services.bible_service import BibleService


@pytest.fixture
def service(corpus):
    return BibleService(corpus)


def test_list_books_returns_66_contiguous(service):
    books = service.list_books()
    assert len(books) == 66
    assert [b.id for b in books] == list(range(1, 67))
    assert books[38].testament == 'Old'
    assert books[39].testament == 'New'


def test_psalm_23_starts_with_shepherd(service):
    verses = service.get_chapter(19, 23)
    assert verses[0].verse == 1
    assert verses[0].text == "The Lord is my shepherd, I lack nothing."
    assert verses[0].reference == "Psalms 23:1"


def test_every_chapter_is_strictly_increasing(service):
    for book in service.list_books():
        for chapter in service.get_chapters(book.id):
            numbers = [v.verse for v in service.get_chapter(book.id, chapter)]
            assert all(a < b for a, b in zip(numbers, numbers[1:]))


def test_get_chapter_out_of_range_is_empty(service):
    assert service.get_chapter(19, 151) == []
    assert service.get_chapter(67, 1) == []
    assert service.get_chapter(19, 0) == []


def test_get_chapters_lists_canonical_count(service):
    assert service.get_chapters(19) == list(range(1, 151))
    assert service.get_chapters(99) == []


def test_get_verse(service):
    verse = service.get_verse(43, 3, 16)
    assert verse.book_name == 'John'
    assert verse.text.startswith('For God so loved the world')
    assert service.get_verse(43, 3, 99) is None


def test_search_love_matches_case_insensitively(service):
    results = service.search_verses('love')
    assert results
    assert len(results) <= 50
    assert all('love' in v.text.lower() for v in results)
    assert results == sorted(results, key=lambda v: v.id)


def test_search_is_case_insensitive_on_query(service):
    assert service.search_verses('SHEPHERD') == service.search_verses('shepherd')


def test_search_single_character_returns_nothing(service):
    assert service.search_verses('a') == []
    assert service.search_verses(' a ') == []
    assert service.search_verses('') == []
    assert service.search_verses(None) == []


def test_search_caps_results_at_50(small_corpus):
    service = BibleService(small_corpus)
    results = service.search_verses('love')
    assert len(results) == 50
    # Corpus order: book 1 comes before book 2 even though it is listed second in the file
    assert results[0].book_id == 1
    assert results[1].book_id == 2 and results[1].verse == 1


def test_daily_verse_is_a_love_verse(corpus):
    service = BibleService(corpus, rng=random.Random(7))
    verse = service.daily_verse()
    assert 'love' in verse.text.lower()


def test_daily_verse_none_when_nothing_matches(service):
    assert service.daily_verse('zzzz-no-such-word') is None


def test_find_book(service):
    assert service.find_book('Romans').id == 45
    assert service.find_book('') is None
