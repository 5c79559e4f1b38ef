from services import settings_service
from services.ai_service import DEFAULT_MODELS
from tests.conftest import NO_AI_CREDENTIALS


def test_set_and_get_setting(db):
    assert settings_service.get_setting('font_size', 'medium') == 'medium'
    settings_service.set_setting('font_size', 'large')
    settings_service.set_setting('font_size', 'small')
    assert settings_service.get_setting('font_size') == 'small'
    assert settings_service.delete_setting('font_size') is True
    assert settings_service.delete_setting('font_size') is False


def test_unconfigured_by_default(db):
    config = settings_service.load_ai_config(dict(NO_AI_CREDENTIALS))
    assert config.provider == 'openai'
    assert config.model == DEFAULT_MODELS['openai']
    assert config.is_configured is False


def test_groq_environment_key_selects_groq(db):
    env = dict(NO_AI_CREDENTIALS, GROQ_API_KEY='gsk-env')
    config = settings_service.load_ai_config(env)
    assert config.provider == 'groq'
    assert config.api_key == 'gsk-env'
    assert config.model == DEFAULT_MODELS['groq']


def test_saved_settings_take_precedence(db):
    settings_service.save_ai_config('gemini', 'saved-key')
    env = dict(NO_AI_CREDENTIALS, GROQ_API_KEY='gsk-env')

    config = settings_service.load_ai_config(env)
    assert config.provider == 'gemini'
    assert config.api_key == 'saved-key'
    assert config.model == 'gemini-1.5-flash'


def test_saved_provider_uses_matching_environment_key(db):
    settings_service.save_ai_config('anthropic')
    env = dict(NO_AI_CREDENTIALS, ANTHROPIC_API_KEY='sk-ant-env')

    config = settings_service.load_ai_config(env)
    assert config.provider == 'anthropic'
    assert config.api_key == 'sk-ant-env'


def test_empty_key_clears_saved_key(db):
    settings_service.save_ai_config('openai', 'sk-1')
    settings_service.save_ai_config('openai', '')
    assert settings_service.get_setting(settings_service.AI_API_KEY_KEY) is None


def test_changing_provider_without_key_forgets_saved_key(db):
    settings_service.save_ai_config('openai', 'sk-openai')
    settings_service.save_ai_config('openai')
    assert settings_service.get_setting(settings_service.AI_API_KEY_KEY) == 'sk-openai'

    settings_service.save_ai_config('groq')
    env = dict(NO_AI_CREDENTIALS, GROQ_API_KEY='gsk-env')
    config = settings_service.load_ai_config(env)
    assert config.provider == 'groq'
    assert config.api_key == 'gsk-env'

    settings_service.save_ai_config('gemini')
    assert settings_service.load_ai_config(env).is_configured is False
