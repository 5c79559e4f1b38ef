# routes/settings.py
from flask import Blueprint, request, jsonify, current_app
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from schemas.settings_schemas import AIConfigUpdate, AIConfigRead
from services import settings_service
import logging

logger = logging.getLogger(__name__)
settings_bp = Blueprint('settings_bp', __name__, url_prefix='/api/settings')

@settings_bp.route("/ai", methods=['GET'])
def get_ai_config():
    gateway = current_app.extensions['ai_gateway']
    return jsonify(AIConfigRead(**gateway.public_config()).model_dump()), 200

@settings_bp.route("/ai", methods=['PUT'])
def update_ai_config():
    data = request.get_json(silent=True)
    if not data or not isinstance(data, dict):
        return jsonify({"error": "Invalid JSON payload"}), 400

    try:
        update = AIConfigUpdate.model_validate(data)
    except ValidationError as e:
        return jsonify({"error": "Invalid AI settings", "details": e.errors(include_url=False, include_context=False)}), 400

    api_key = update.api_key.strip() if update.api_key is not None else None
    try:
        settings_service.save_ai_config(update.provider, api_key)
        # Resolved the same way as at startup so an env key for the new provider applies
        resolved = settings_service.load_ai_config(current_app.config)
    except SQLAlchemyError as e:
        logger.error(f"Error saving AI settings: {str(e)}", exc_info=True)
        return jsonify({"error": "Failed to save AI settings"}), 500

    gateway = current_app.extensions['ai_gateway']
    gateway.update_config(provider=resolved.provider, api_key=resolved.api_key)
    return jsonify(AIConfigRead(**gateway.public_config()).model_dump()), 200
