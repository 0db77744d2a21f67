"""
Базовый протокол для AI провайдеров.
Единый интерфейс validate/translate и типизированный результат вызова.
"""
import logging
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator, Generic, Optional, TypeVar

import httpx

from quiz_ai.domain.entities.ai_request import RequestConfig

T = TypeVar("T")

DEFAULT_TIMEOUT = 45.0

# Инструкция для модели перед заданием
ROLE_PROMPT = "You are a school teacher. Explain the assignment to the student."

# Содержимое запроса проверки подключения
PING_PROMPT = "Ping"


class AiClientError(Exception):
    """Базовое исключение для операций AI клиента"""
    pass


class AiConfigurationError(AiClientError):
    """Не заполнены обязательные параметры подключения"""
    pass


class AiUnauthorizedError(AiClientError):
    """Провайдер отклонил ключ или доступ запрещен"""

    def __init__(self, message: str = "Unauthorized: Invalid API key or access denied."):
        super().__init__(message)


class AiNoContentError(AiClientError):
    """Успешный ответ без полезного содержимого"""

    def __init__(self, message: str = "No translation response received."):
        super().__init__(message)


class AiTransportError(AiClientError):
    """Любая другая ошибка HTTP или транспорта"""

    def __init__(self, status_code: Optional[int], message: str):
        self.status_code = status_code
        self.message = message
        if status_code is None:
            super().__init__(message)
        else:
            super().__init__(f"HTTP {status_code}: {message}")


@dataclass(frozen=True)
class AiResult(Generic[T]):
    """Результат вызова провайдера: значение или одна из ошибок AiClientError"""
    value: Optional[T] = None
    error: Optional[AiClientError] = None

    @classmethod
    def success(cls, value: T = None) -> "AiResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: AiClientError) -> "AiResult[T]":
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """
        Возвращает значение или поднимает сохраненную ошибку.

        Raises:
            AiClientError: Если вызов завершился ошибкой
        """
        if self.error is not None:
            raise self.error
        return self.value


class AiProviderAdapter(ABC):
    """
    Абстрактный адаптер AI провайдера.
    Адаптер не хранит состояние между вызовами.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Args:
            base_url: Базовый адрес API провайдера
            timeout: Таймаут connect/read/write/pool в секундах
            http_client: Общий HTTP клиент; если не задан, создается на каждый вызов
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._http_client = http_client
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @staticmethod
    def _check_header_values(**values: str) -> Optional[AiConfigurationError]:
        """Значения для HTTP заголовков должны кодироваться в ASCII"""
        for name, value in values.items():
            try:
                value.encode("ascii")
            except UnicodeEncodeError:
                return AiConfigurationError(f"Недопустимые символы в параметре {name}")
        return None

    @asynccontextmanager
    async def _http_session(self) -> AsyncIterator[httpx.AsyncClient]:
        """Общий клиент не закрывается; собственный закрывается после вызова"""
        if self._http_client is not None:
            yield self._http_client
            return

        async with httpx.AsyncClient(timeout=httpx.Timeout(self.timeout)) as client:
            yield client

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Возвращает название провайдера."""
        pass

    @abstractmethod
    async def validate(self, config: RequestConfig) -> AiResult[None]:
        """
        Проверяет, что ключ и параметры подключения рабочие.

        Args:
            config: Конфигурация запроса

        Returns:
            AiResult без значения или с ошибкой
        """
        pass

    @abstractmethod
    async def translate(self, config: RequestConfig, prompt: str) -> AiResult[str]:
        """
        Запрашивает у модели объяснение задания.

        Args:
            config: Конфигурация запроса
            prompt: Текст задания

        Returns:
            AiResult с текстом ответа модели
        """
        pass
