"""
Модуль прямого подключения к AI провайдерам.
Содержит провайдеров, маршрутизатор и сервисы.
"""
from .providers import (
    AiProviderAdapter, AiResult,
    AiClientError, AiConfigurationError, AiUnauthorizedError, AiNoContentError, AiTransportError,
    OpenAIProvider, YandexGPTProvider,
)
from .router import AiProviderRouter, build_router
from .services import AiClientService, ai_client_service

__all__ = [
    # Базовые типы
    "AiProviderAdapter",
    "AiResult",
    "AiClientError",
    "AiConfigurationError",
    "AiUnauthorizedError",
    "AiNoContentError",
    "AiTransportError",

    # Провайдеры
    "OpenAIProvider",
    "YandexGPTProvider",

    # Маршрутизатор
    "AiProviderRouter",
    "build_router",

    # Сервисы
    "AiClientService",
    "ai_client_service",
]
