# services/ai_service.py
import logging
from dataclasses import dataclass
from typing import List, Dict, Optional

import anthropic
import requests

from utils.fallback import get_fallback_response

logger = logging.getLogger(__name__)

OPENAI_API_URL = "https://api.openai.com/v1/chat/completions"
GROQ_API_URL = "https://api.groq.com/openai/v1/chat/completions"
GEMINI_API_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"

DEFAULT_MODELS = {
    'openai': 'gpt-3.5-turbo',
    'anthropic': 'claude-3-5-sonnet-20241022',
    'groq': 'llama-3.1-70b-versatile',
    'gemini': 'gemini-1.5-flash',
}

# Seconds; a timed out call falls back to a canned reply
TIMEOUTS = {
    'openai': 10,
    'groq': 10,
    'anthropic': 15,
    'gemini': 15,
}

PLACEHOLDER_API_KEY = 'YOUR_API_KEY_HERE'
DEFAULT_HISTORY_LIMIT = 6

SYSTEM_PROMPT = """Role: "Father", a loving, wise father figure.
Goal: Provide spiritual comfort via KJV Scripture.

Rules:
- Be empathetic & warm (use "beloved", "my child").
- Provide 1-3 relevant Bible verses (KJV).
- Be brief. 3 paragraphs max unless depth requested.
- Format: [Text] - [Reference] (e.g., 📖 Psalm 23:1).
- Tone: Encouraging, non-judgmental, wise.

Example Structure:
1. Warm acknowledgment.
2. 📖 [Verse] - [Ref]
3. Brief encouragement."""


class UnsupportedProviderError(Exception):
    pass


@dataclass
class AIConfig:
    provider: str = 'openai'
    api_key: str = ''
    model: Optional[str] = None

    def __post_init__(self):
        if self.model is None:
            self.model = DEFAULT_MODELS.get(self.provider, '')

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key) and self.api_key != PLACEHOLDER_API_KEY

    def public(self) -> Dict:
        """Configuration safe to show a client; never includes the key."""
        return {
            "provider": self.provider,
            "model": self.model,
            "is_configured": self.is_configured,
        }


class AIGateway:
    """Single-attempt chat completion against the configured vendor, with a canned fallback."""

    def __init__(self, config: AIConfig, history_limit: int = DEFAULT_HISTORY_LIMIT):
        self.config = config
        self.history_limit = history_limit
        self._providers = {
            'openai': self._call_openai,
            'anthropic': self._call_anthropic,
            'groq': self._call_groq,
            'gemini': self._call_gemini,
        }

    def update_config(self, provider: Optional[str] = None, api_key: Optional[str] = None) -> AIConfig:
        if provider is not None and provider != self.config.provider:
            self.config.provider = provider
            self.config.model = DEFAULT_MODELS.get(provider, '')
            # A key is only valid for the provider it was issued by
            self.config.api_key = ''
        if api_key is not None:
            self.config.api_key = api_key
        logger.info(f"AI provider set to {self.config.provider} ({self.config.model})")
        return self.config

    def public_config(self) -> Dict:
        return self.config.public()

    def get_response(self, user_text: str, history: Optional[List[Dict[str, str]]] = None) -> str:
        if not self.config.is_configured:
            logger.info("No AI credentials configured, using fallback response")
            return get_fallback_response(user_text)

        provider = self.config.provider
        trimmed = list(history or [])[-self.history_limit:] if self.history_limit > 0 else []
        try:
            provider_fn = self._providers.get(provider)
            if provider_fn is None:
                raise UnsupportedProviderError(f"Unsupported provider: {provider}")
            reply = provider_fn(user_text, trimmed)
            if not reply or not reply.strip():
                raise ValueError("Empty response from provider")
            return reply.strip()
        except Exception as e:
            logger.error(f"AI Service Error ({provider}): {e}")
            return get_fallback_response(user_text)

    def _chat_completions(self, url, user_text, history):
        messages = [{"role": "system", "content": SYSTEM_PROMPT}]
        messages.extend(history)
        messages.append({"role": "user", "content": user_text})

        response = requests.post(
            url,
            headers={
                "Authorization": f"Bearer {self.config.api_key}",
                "Content-Type": "application/json",
            },
            json={
                "model": self.config.model,
                "messages": messages,
                "temperature": 0.8,
                "max_tokens": 500,
            },
            timeout=TIMEOUTS[self.config.provider],
        )
        response.raise_for_status()
        return response.json()["choices"][0]["message"]["content"]

    def _call_openai(self, user_text, history):
        return self._chat_completions(OPENAI_API_URL, user_text, history)

    def _call_groq(self, user_text, history):
        return self._chat_completions(GROQ_API_URL, user_text, history)

    def _call_anthropic(self, user_text, history):
        # The Messages API requires the conversation to open with a user turn
        while history and history[0]["role"] != "user":
            history = history[1:]

        client = anthropic.Anthropic(
            api_key=self.config.api_key,
            timeout=TIMEOUTS['anthropic'],
            max_retries=0,
        )
        message = client.messages.create(
            model=self.config.model,
            max_tokens=512,
            system=SYSTEM_PROMPT,
            messages=history + [{"role": "user", "content": user_text}],
        )
        return message.content[0].text

    def _call_gemini(self, user_text, history):
        contents = [
            {
                "role": "model" if m["role"] == "assistant" else "user",
                "parts": [{"text": m["content"]}],
            }
            for m in history
        ]
        contents.append({"role": "user", "parts": [{"text": user_text}]})

        response = requests.post(
            GEMINI_API_URL.format(model=self.config.model),
            params={"key": self.config.api_key},
            headers={"Content-Type": "application/json"},
            json={
                "contents": contents,
                "systemInstruction": {"parts": [{"text": SYSTEM_PROMPT}]},
                "generationConfig": {"temperature": 0.7, "maxOutputTokens": 400},
            },
            timeout=TIMEOUTS['gemini'],
        )
        response.raise_for_status()
        return response.json()["candidates"][0]["content"]["parts"][0]["text"]
