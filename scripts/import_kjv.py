# scripts/import_kjv.py
"""Convert a reference-keyed KJV JSON file into the nested corpus format.

Input:  {"Genesis 1:1": "In the beginning ...", "Genesis 1:2": "...", ...}
Output: {"translation": "KJV", "books": [{"id": 1, "name": "Genesis", ...}]}

Usage: python scripts/import_kjv.py <path_to_kjv.json> [output_path]
"""
import json
import logging
import sys
from pathlib import Path

# Add the parent directory to the Python path properly
current_dir = Path(__file__).resolve().parent
project_dir = current_dir.parent
sys.path.insert(0, str(project_dir))

from models.bible import CANONICAL_BOOKS, testament_for

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = project_dir / 'data' / 'kjv.json'

# Alternate spellings found in public KJV dumps
BOOK_ALIASES = {
    "Solomon's Song": 'Song of Solomon',
    'Song of Songs': 'Song of Solomon',
    'Psalm': 'Psalms',
    'Revelation of John': 'Revelation',
}

BOOK_IDS = {name: i for i, (name, _) in enumerate(CANONICAL_BOOKS, start=1)}


def parse_reference(ref):
    """Parse a reference like 'Genesis 1:1' into (book_name, chapter, verse)"""
    book_chapter, verse = ref.rsplit(':', 1)
    book_parts = book_chapter.rsplit(' ', 1)
    chapter = book_parts[-1]
    book_name = ' '.join(book_parts[:-1])
    return book_name, int(chapter), int(verse)


def clean_verse_text(text):
    """Clean verse text by removing any leading '#' and trimming whitespace"""
    return text.lstrip('#').strip()


def build_corpus(verses_data, translation='KJV'):
    """Returns (corpus_document, skipped_references)."""
    chapters_by_book = {}
    skipped = []

    for ref, text in verses_data.items():
        try:
            book_name, chapter, verse = parse_reference(ref)
        except ValueError:
            skipped.append(ref)
            logger.warning(f"Could not parse reference '{ref}'")
            continue

        book_name = BOOK_ALIASES.get(book_name, book_name)
        book_id = BOOK_IDS.get(book_name)
        if book_id is None:
            skipped.append(ref)
            logger.warning(f"Unknown book '{book_name}' in reference '{ref}'")
            continue

        chapter_map = chapters_by_book.setdefault(book_id, {})
        chapter_map.setdefault(str(chapter), {})[str(verse)] = clean_verse_text(text)

    books = []
    for book_id, (name, chapter_count) in enumerate(CANONICAL_BOOKS, start=1):
        chapter_map = chapters_by_book.get(book_id, {})
        books.append({
            'id': book_id,
            'name': name,
            'testament': testament_for(book_id),
            'chapters': chapter_count,
            'verses': {
                c: dict(sorted(chapter_map[c].items(), key=lambda item: int(item[0])))
                for c in sorted(chapter_map, key=int)
            },
        })

    return {'translation': translation, 'books': books}, skipped


def import_kjv_data(json_path, output_path=DEFAULT_OUTPUT):
    logger.info(f"Reading JSON file from: {json_path}")
    with open(json_path, 'r', encoding='utf-8') as f:
        verses_data = json.load(f)

    corpus, skipped = build_corpus(verses_data)
    verse_count = sum(len(v) for b in corpus['books'] for v in b['verses'].values())

    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(corpus, f, ensure_ascii=False, indent=1)

    logger.info(f"Wrote {verse_count} verses to {output_path}")
    if skipped:
        logger.warning(f"Skipped {len(skipped)} verses due to unknown book names")
    return verse_count, skipped


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    if len(sys.argv) not in (2, 3):
        print("Usage: python scripts/import_kjv.py <path_to_kjv.json> [output_path]")
        sys.exit(1)

    output = sys.argv[2] if len(sys.argv) == 3 else DEFAULT_OUTPUT
    import_kjv_data(sys.argv[1], output)
