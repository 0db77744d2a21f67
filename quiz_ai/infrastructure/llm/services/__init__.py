"""
Сервисы AI клиента.
Экспортирует основные сервисы.
"""
from .ai_client_service import AiClientService, ai_client_service

__all__ = [
    "AiClientService",
    "ai_client_service",
]
