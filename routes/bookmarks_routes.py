# routes/bookmarks_routes.py
from flask import Blueprint, request, jsonify, current_app
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from services import bookmark_service
import logging

logger = logging.getLogger(__name__)
bookmarks_bp = Blueprint('bookmarks_bp', __name__, url_prefix='/api/bookmarks')

@bookmarks_bp.route("/", methods=['POST'])
def create_bookmark():
    data = request.get_json(silent=True)
    if not data or not isinstance(data, dict):
        return jsonify({"error": "Invalid JSON payload"}), 400

    required_fields = ['book_id', 'chapter', 'verse']
    if not all(field in data for field in required_fields):
        return jsonify({"error": "Missing required fields (book_id, chapter, verse)"}), 400

    try:
        bookmark, created = bookmark_service.add_bookmark(data['book_id'], data['chapter'], data['verse'])
    except ValidationError as e:
        return jsonify({"error": "Invalid bookmark", "details": e.errors(include_url=False, include_context=False)}), 400
    except SQLAlchemyError as e:
        logger.error(f"Error creating bookmark: {str(e)}", exc_info=True)
        return jsonify({"error": "Failed to create bookmark"}), 500

    # A repeated bookmark is not an error; the existing one is returned
    return jsonify(bookmark.model_dump(mode='json')), 201 if created else 200

@bookmarks_bp.route("/", methods=['GET'])
def get_bookmarks():
    try:
        corpus = current_app.extensions['bible_service'].corpus
        bookmarks = bookmark_service.list_bookmarks(corpus)
        return jsonify([b.model_dump(mode='json') for b in bookmarks]), 200
    except SQLAlchemyError as e:
        logger.error(f"Error fetching bookmarks: {str(e)}", exc_info=True)
        return jsonify({"error": "Failed to fetch bookmarks"}), 500

@bookmarks_bp.route("/<int:bookmark_id>", methods=['DELETE'])
def delete_bookmark(bookmark_id):
    try:
        deleted = bookmark_service.delete_bookmark(bookmark_id)
        return jsonify({"message": "Bookmark deleted" if deleted else "Bookmark not found", "deleted": deleted}), 200
    except SQLAlchemyError as e:
        logger.error(f"Error deleting bookmark {bookmark_id}: {str(e)}", exc_info=True)
        return jsonify({"error": "Failed to delete bookmark"}), 500
