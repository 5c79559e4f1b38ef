# routes/chat.py
from flask import Blueprint, request, jsonify, current_app
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from schemas.chat_schemas import ChatRequest
from services import chat_service
import logging

logger = logging.getLogger(__name__)
chat_bp = Blueprint('chat_bp', __name__, url_prefix='/api/chat')

@chat_bp.route("/", methods=['POST'])
def send_message():
    """
    Records the user's message, asks the configured AI provider for a reply
    (or picks a canned one) and records the reply. Both messages are returned.
    """
    data = request.get_json(silent=True)
    if not data or not isinstance(data, dict):
        return jsonify({"error": "Invalid JSON payload"}), 400

    try:
        chat_request = ChatRequest.model_validate(data)
    except ValidationError as e:
        return jsonify({"error": "Invalid message", "details": e.errors(include_url=False, include_context=False)}), 400

    gateway = current_app.extensions['ai_gateway']
    try:
        # Context is read before the new message is stored so it is not sent twice
        history = chat_service.recent_turns(gateway.history_limit)
        user_message = chat_service.append_message('user', chat_request.message)
        reply_text = gateway.get_response(chat_request.message, history)
        reply = chat_service.append_message('assistant', reply_text)
    except SQLAlchemyError as e:
        logger.error(f"Error saving chat message: {str(e)}", exc_info=True)
        return jsonify({"error": "Failed to save chat message"}), 500

    return jsonify({
        "user_message": user_message.model_dump(mode='json'),
        "reply": reply.model_dump(mode='json'),
    }), 200

@chat_bp.route("/history", methods=['GET'])
def get_history():
    try:
        messages = chat_service.list_history()
        return jsonify([m.model_dump(mode='json') for m in messages]), 200
    except SQLAlchemyError as e:
        logger.error(f"Error fetching chat history: {str(e)}", exc_info=True)
        return jsonify({"error": "Failed to fetch chat history"}), 500

@chat_bp.route("/history", methods=['DELETE'])
def clear_history():
    try:
        deleted = chat_service.clear_history()
        return jsonify({"message": "Chat history cleared", "deleted": deleted}), 200
    except SQLAlchemyError as e:
        logger.error(f"Error clearing chat history: {str(e)}", exc_info=True)
        return jsonify({"error": "Failed to clear chat history"}), 500
