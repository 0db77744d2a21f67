"""
Сохраненное подключение к AI провайдеру.
Словарь настроек отличается от словаря клиента: CHAT_GPT вместо OPENAI и отдельный NONE.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .ai_request import ProviderKind, RequestConfig


class AiConnectionNotConfiguredError(Exception):
    """Активное подключение к AI отсутствует"""
    pass


class AiConnectionProviderType(Enum):
    """Тип провайдера в настройках подключения"""
    NONE = "none"
    YANDEX = "yandex"
    CHAT_GPT = "chat_gpt"

    @classmethod
    def from_setting(cls, value: Optional[str]) -> "AiConnectionProviderType":
        """Разбор значения из переменной окружения"""
        normalized = (value or "").strip().lower()
        if not normalized:
            return cls.NONE
        for item in cls:
            if item.value == normalized:
                return item
        raise ValueError(f"Неизвестный тип AI провайдера: {value}")


@dataclass(frozen=True)
class AiConnection:
    """Подключение к AI, выбранное пользователем"""
    provider_type: AiConnectionProviderType
    api_key: str
    api_cloud_folder: Optional[str] = None
    model: Optional[str] = None
    is_active: bool = True

    def to_request_config(self) -> RequestConfig:
        """
        Преобразует подключение в конфигурацию запроса.

        Raises:
            AiConnectionNotConfiguredError: Если провайдер не выбран
        """
        if self.provider_type is AiConnectionProviderType.YANDEX:
            provider = ProviderKind.YANDEX
        elif self.provider_type is AiConnectionProviderType.CHAT_GPT:
            provider = ProviderKind.OPENAI
        else:
            raise AiConnectionNotConfiguredError("Нет активного подключения к AI")

        return RequestConfig(
            provider=provider,
            api_key=self.api_key,
            api_folder=self.api_cloud_folder,
            model=self.model,
        )
