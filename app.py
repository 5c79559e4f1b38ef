# app.py
from flask import Flask, jsonify, request, g
from flask_cors import CORS
from werkzeug.middleware.proxy_fix import ProxyFix
from config import Config
from database import init_db, get_db_session
from models import Bookmark, ChatMessage
from routes.bible import bible_bp
from routes.bookmarks_routes import bookmarks_bp
from routes.chat import chat_bp
from routes.settings import settings_bp
from services.ai_service import AIGateway
from services.bible_service import BibleService
from services.settings_service import load_ai_config
from utils.corpus import get_corpus
import os
import logging
import time
import sys

# Configure logging to output to stdout
logging.basicConfig(
    level=getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)


def create_app(config_overrides=None, corpus=None):
    """Build the Flask app. ``corpus`` lets callers inject an already-loaded corpus."""
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1)

    app.json.sort_keys = False  # Preserve order of keys in JSON responses
    app.json.ensure_ascii = False  # Canned replies carry emoji
    app.config['CORS_HEADERS'] = 'Content-Type'

    CORS(app, resources={
        r"/api/*": {
            "origins": "*",
            "methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            "allow_headers": ["Content-Type"],
        }
    })

    # Ensure URLs with or without trailing slashes are handled the same way
    app.url_map.strict_slashes = False

    # A missing or broken corpus is fatal: there is nothing to serve without it
    if corpus is None:
        corpus = get_corpus(app.config['BIBLE_DATA_PATH'])

    init_db(app.config['DATABASE_URL'])

    app.extensions['bible_service'] = BibleService(
        corpus,
        search_limit=app.config['SEARCH_RESULT_LIMIT'],
        min_query_length=app.config['SEARCH_MIN_QUERY_LENGTH'],
    )
    app.extensions['ai_gateway'] = AIGateway(
        load_ai_config(app.config),
        history_limit=app.config['AI_HISTORY_LIMIT'],
    )

    # Register blueprints
    app.register_blueprint(bible_bp, url_prefix='/api/bible')
    app.register_blueprint(bookmarks_bp)
    app.register_blueprint(chat_bp)
    app.register_blueprint(settings_bp)

    @app.before_request
    def before_request():
        g.start_time = time.time()

    @app.after_request
    def after_request(response):
        # Log request duration
        start_time = g.get('start_time')
        if start_time is not None:
            duration = time.time() - start_time
            logger.info(f"Request to {request.path} took {duration:.2f} seconds")
        return response

    @app.route('/health', methods=['GET'])
    def health():
        """Health check endpoint that also verifies the database and corpus"""
        try:
            with get_db_session() as db:
                bookmark_count = db.query(Bookmark).count()
                message_count = db.query(ChatMessage).count()

            bible_service = app.extensions['bible_service']
            return jsonify({
                'status': 'healthy',
                'database': 'connected',
                'books': len(bible_service.corpus.books),
                'verses': len(bible_service.corpus),
                'bookmarks': bookmark_count,
                'chat_messages': message_count,
                'ai': app.extensions['ai_gateway'].public_config(),
                'timestamp': time.time()
            })
        except Exception as e:
            logger.error(f"Health check failed: {str(e)}")
            return jsonify({
                'status': 'unhealthy',
                'error': str(e),
                'timestamp': time.time()
            }), 500

    logger.info("Application initialized")
    return app


if __name__ == '__main__':
    print("Starting Flask server...")
    port = int(os.getenv('PORT', Config.PORT))
    create_app().run(debug=True, port=port)
