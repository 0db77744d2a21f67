"""
AI провайдеры для различных сервисов.
Экспортирует базовый интерфейс, классификатор ответов и реализации.
"""
from .base import (
    AiProviderAdapter, AiResult,
    AiClientError, AiConfigurationError, AiUnauthorizedError, AiNoContentError, AiTransportError,
    ROLE_PROMPT, PING_PROMPT,
)
from .response_classifier import classify_response, classify_transport_failure
from .openai_provider import OpenAIProvider, DEFAULT_OPENAI_MODEL, REASONING_MODEL
from .yandex_provider import YandexGPTProvider, DEFAULT_YANDEX_MODEL

__all__ = [
    "AiProviderAdapter",
    "AiResult",
    "AiClientError",
    "AiConfigurationError",
    "AiUnauthorizedError",
    "AiNoContentError",
    "AiTransportError",
    "ROLE_PROMPT",
    "PING_PROMPT",
    "classify_response",
    "classify_transport_failure",
    "OpenAIProvider",
    "YandexGPTProvider",
    "DEFAULT_OPENAI_MODEL",
    "REASONING_MODEL",
    "DEFAULT_YANDEX_MODEL",
]
