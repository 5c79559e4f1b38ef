# routes/bible.py
from flask import Blueprint, jsonify, request, current_app
import logging
import traceback

bible_bp = Blueprint('bible', __name__)

logger = logging.getLogger(__name__)


def _bible_service():
    return current_app.extensions['bible_service']


@bible_bp.route('/books', methods=['GET'])
def get_books():
    try:
        books = _bible_service().list_books()
        return jsonify([book.to_json() for book in books])
    except Exception as e:
        logger.error(f"Error in get_books: {str(e)}", exc_info=True)
        logger.error(f"Stack trace: {traceback.format_exc()}")
        return jsonify({"error": str(e)}), 500

@bible_bp.route('/books/<int:book_id>', methods=['GET'])
def get_book(book_id):
    book = _bible_service().get_book(book_id)
    if not book:
        return jsonify({"error": "Book not found"}), 404
    return jsonify(book.to_json())

@bible_bp.route('/chapters/<int:book_id>', methods=['GET'])
def get_chapters(book_id):
    chapters = _bible_service().get_chapters(book_id)
    if not chapters:
        return jsonify({"error": "Book not found"}), 404
    return jsonify(chapters)

@bible_bp.route('/verses/<int:book_id>/<int:chapter>', methods=['GET'])
def get_verses(book_id, chapter):
    # An out of range chapter is an empty result, not an error
    verses = _bible_service().get_chapter(book_id, chapter)
    return jsonify([verse.to_json() for verse in verses])

@bible_bp.route('/verse/<int:book_id>/<int:chapter>/<int:verse>', methods=['GET'])
def get_single_verse(book_id, chapter, verse):
    verse_obj = _bible_service().get_verse(book_id, chapter, verse)
    if not verse_obj:
        return jsonify({"error": "Verse not found"}), 404
    return jsonify(verse_obj.to_json())

@bible_bp.route('/search', methods=['GET'])
def search_bible():
    query_str = request.args.get('q', '')
    try:
        results = _bible_service().search_verses(query_str)
        logger.info(f"Search for '{query_str}' returned {len(results)} verses")
        return jsonify([verse.to_json() for verse in results])
    except Exception as e:
        logger.error(f"Search error: {str(e)}", exc_info=True)
        return jsonify({'error': str(e)}), 500

@bible_bp.route('/daily-verse', methods=['GET'])
def daily_verse():
    keyword = request.args.get('keyword') or 'love'
    verse = _bible_service().daily_verse(keyword)
    if not verse:
        return jsonify({"error": "No verse found"}), 404
    return jsonify(verse.to_json())
