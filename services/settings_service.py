# services/settings_service.py
import logging

from database import get_db_session
from models import Setting
from services.ai_service import AIConfig, DEFAULT_MODELS

logger = logging.getLogger(__name__)

AI_PROVIDER_KEY = 'ai_provider'
AI_API_KEY_KEY = 'ai_api_key'

# Environment variable (Config attribute) holding each provider's key
PROVIDER_ENV_KEYS = {
    'openai': 'OPENAI_API_KEY',
    'anthropic': 'ANTHROPIC_API_KEY',
    'groq': 'GROQ_API_KEY',
    'gemini': 'GEMINI_API_KEY',
}


def get_setting(key, default=None):
    with get_db_session() as db:
        setting = db.get(Setting, key)
        if setting is None or setting.value is None:
            return default
        return setting.value


def set_setting(key, value):
    with get_db_session() as db:
        setting = db.get(Setting, key)
        if setting is None:
            db.add(Setting(key=key, value=value))
        else:
            setting.value = value


def delete_setting(key):
    with get_db_session() as db:
        setting = db.get(Setting, key)
        if setting is None:
            return False
        db.delete(setting)
        return True


def load_ai_config(config):
    """Build the AI configuration from saved settings, falling back to the environment.

    ``config`` is a mapping such as Flask's ``app.config``.
    """
    saved_provider = get_setting(AI_PROVIDER_KEY)
    saved_key = get_setting(AI_API_KEY_KEY)
    groq_key = config.get('GROQ_API_KEY')

    if saved_provider in DEFAULT_MODELS:
        provider = saved_provider
    elif config.get('AI_PROVIDER') in DEFAULT_MODELS and config.get('AI_API_KEY'):
        provider = config['AI_PROVIDER']
    elif groq_key:
        provider = 'groq'
    else:
        provider = config.get('AI_PROVIDER') if config.get('AI_PROVIDER') in DEFAULT_MODELS else 'openai'

    if saved_key:
        api_key = saved_key
    elif config.get('AI_API_KEY') and provider == config.get('AI_PROVIDER'):
        api_key = config['AI_API_KEY']
    else:
        api_key = config.get(PROVIDER_ENV_KEYS[provider]) or ''

    ai_config = AIConfig(provider=provider, api_key=api_key)
    logger.info(f"Loaded AI config: provider={ai_config.provider} configured={ai_config.is_configured}")
    return ai_config


def save_ai_config(provider, api_key=None):
    previous_provider = get_setting(AI_PROVIDER_KEY)
    set_setting(AI_PROVIDER_KEY, provider)
    if api_key is None:
        if previous_provider != provider:
            delete_setting(AI_API_KEY_KEY)
    elif api_key:
        set_setting(AI_API_KEY_KEY, api_key)
    else:
        delete_setting(AI_API_KEY_KEY)
    logger.info(f"Saved AI provider {provider}")
