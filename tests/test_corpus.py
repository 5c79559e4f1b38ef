import pytest

from utils.corpus import CorpusLoadError, load_corpus, get_corpus, reset_corpus
from tests.conftest import BUNDLED_CORPUS, make_book


def test_bundled_corpus_has_66_books_in_canonical_order(corpus):
    ids = [book.id for book in corpus.books]
    assert ids == list(range(1, 67))
    assert corpus.book(1).name == 'Genesis'
    assert corpus.book(66).name == 'Revelation'


def test_testament_split_at_39(corpus):
    assert all(b.testament == 'Old' for b in corpus.books if b.id <= 39)
    assert all(b.testament == 'New' for b in corpus.books if b.id >= 40)
    assert corpus.book(39).name == 'Malachi'
    assert corpus.book(40).name == 'Matthew'


def test_verse_ids_follow_corpus_order(small_corpus):
    refs = [(v.book_id, v.chapter, v.verse) for v in small_corpus.verses]
    assert refs == sorted(refs)
    assert [v.id for v in small_corpus.verses] == list(range(1, len(small_corpus) + 1))


def test_chapter_verses_sorted_numerically(small_corpus):
    verses = small_corpus.chapter(1, 1)
    assert [v.verse for v in verses] == [1, 9, 10]


def test_book_lookup_by_name_ignores_case(corpus):
    assert corpus.book_by_name('  psalms ').id == 19
    assert corpus.book_by_name('song of solomon').id == 22
    assert corpus.book_by_name('Maccabees') is None


def test_missing_file_raises(tmp_path):
    with pytest.raises(CorpusLoadError, match='not found'):
        load_corpus(tmp_path / 'missing.json')


def test_invalid_json_raises(tmp_path):
    path = tmp_path / 'broken.json'
    path.write_text('{"books": [', encoding='utf-8')
    with pytest.raises(CorpusLoadError):
        load_corpus(path)


def test_duplicate_book_id_raises(corpus_file):
    path = corpus_file({'books': [make_book(1, 'A', 1, {}), make_book(1, 'B', 1, {})]})
    with pytest.raises(CorpusLoadError, match='Duplicate book id'):
        load_corpus(path)


def test_non_numeric_verse_key_raises(corpus_file):
    path = corpus_file({'books': [make_book(1, 'A', 1, {'1': {'one': 'text'}})]})
    with pytest.raises(CorpusLoadError, match='Invalid verse number'):
        load_corpus(path)


def test_duplicate_verse_number_raises(corpus_file):
    path = corpus_file({'books': [make_book(1, 'A', 1, {'1': {'1': 'one', '01': 'uno'}})]})
    with pytest.raises(CorpusLoadError, match='Duplicate verse A 1:1'):
        load_corpus(path)


def test_duplicate_chapter_number_raises(corpus_file):
    path = corpus_file({'books': [make_book(1, 'A', 2, {'2': {'1': 'two'}, '02': {'2': 'deux'}})]})
    with pytest.raises(CorpusLoadError, match='Duplicate chapter 2 in A'):
        load_corpus(path)


def test_missing_book_field_raises(corpus_file):
    path = corpus_file({'books': [{'id': 1, 'name': 'A', 'testament': 'Old'}]})
    with pytest.raises(CorpusLoadError, match='Malformed book entry'):
        load_corpus(path)


def test_unknown_testament_raises(corpus_file):
    path = corpus_file({'books': [make_book(1, 'A', 1, {}, testament='Apocrypha')]})
    with pytest.raises(CorpusLoadError, match='Unknown testament'):
        load_corpus(path)


def test_get_corpus_loads_once():
    reset_corpus()
    try:
        first = get_corpus(BUNDLED_CORPUS)
        assert get_corpus() is first
    finally:
        reset_corpus()
