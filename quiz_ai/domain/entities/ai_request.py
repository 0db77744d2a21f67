"""
Бизнес-сущности запроса к AI провайдеру.
Чистые данные без зависимостей от транспорта.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ProviderKind(Enum):
    """Поддерживаемые AI провайдеры"""
    OPENAI = "openai"
    YANDEX = "yandex"


@dataclass(frozen=True)
class RequestConfig:
    """
    Конфигурация одного запроса к провайдеру.
    Передается вызывающей стороной на каждую операцию и не изменяется.
    """
    provider: ProviderKind
    api_key: str
    api_folder: Optional[str] = None  # только для YANDEX
    model: Optional[str] = None

    def model_or(self, default: str) -> str:
        """Модель из конфигурации; пустая строка и None равнозначны"""
        if self.model is None or not self.model.strip():
            return default
        return self.model

    @property
    def folder_id(self) -> str:
        """Идентификатор каталога; пустая строка если не задан"""
        return self.api_folder or ""

    def has_folder(self) -> bool:
        return bool(self.folder_id.strip())

    def __repr__(self) -> str:
        # Ключ API не должен попадать в логи
        return (
            f"RequestConfig(provider={self.provider.value}, api_folder={self.api_folder!r}, "
            f"model={self.model!r})"
        )


@dataclass(frozen=True)
class ChatMessage:
    """Сообщение для провайдера"""
    role: str  # system, user
    content: str
