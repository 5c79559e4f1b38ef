# config.py
import os
from pathlib import Path
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent

load_dotenv()

class Config:
    DATABASE_URL = os.getenv('DATABASE_URL', f"sqlite:///{os.path.join(BASE_DIR, 'bible.db')}")
    BIBLE_DATA_PATH = os.getenv('BIBLE_DATA_PATH', os.path.join(BASE_DIR, 'data', 'kjv.json'))

    # AI provider defaults; values saved through the settings API take precedence
    AI_PROVIDER = os.getenv('AI_PROVIDER', 'openai')
    AI_API_KEY = os.getenv('AI_API_KEY', '')
    OPENAI_API_KEY = os.getenv('OPENAI_API_KEY', '')
    ANTHROPIC_API_KEY = os.getenv('ANTHROPIC_API_KEY', '')
    GROQ_API_KEY = os.getenv('GROQ_API_KEY', '')
    GEMINI_API_KEY = os.getenv('GEMINI_API_KEY', '')
    AI_HISTORY_LIMIT = int(os.getenv('AI_HISTORY_LIMIT', 6))

    SEARCH_RESULT_LIMIT = int(os.getenv('SEARCH_RESULT_LIMIT', 50))
    SEARCH_MIN_QUERY_LENGTH = int(os.getenv('SEARCH_MIN_QUERY_LENGTH', 2))

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    PORT = int(os.getenv('PORT', 5001))

    MAX_CONTENT_LENGTH = 1 * 1024 * 1024  # 1MB is plenty for chat and bookmark payloads
