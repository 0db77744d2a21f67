# Domain entities - dataclasses for business objects
from .ai_request import ProviderKind, RequestConfig, ChatMessage
from .ai_connection import AiConnection, AiConnectionProviderType, AiConnectionNotConfiguredError

__all__ = [
    "ProviderKind",
    "RequestConfig",
    "ChatMessage",
    "AiConnection",
    "AiConnectionProviderType",
    "AiConnectionNotConfiguredError",
]
