"""
Основной сервис AI клиента.
Проверка подключения и объяснение заданий с типизированными исключениями.
"""
import logging
from typing import Optional

from quiz_ai.domain.entities.ai_request import RequestConfig
from ..providers import AiClientError, AiUnauthorizedError
from ..router import AiProviderRouter, build_router


class AiClientService:
    """
    Сервис для работы с AI провайдерами.
    Разворачивает AiResult маршрутизатора в значение или исключение AiClientError.
    """

    def __init__(self, router: Optional[AiProviderRouter] = None) -> None:
        self._router = router
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @property
    def router(self) -> AiProviderRouter:
        if self._router is None:
            self._router = build_router()
        return self._router

    async def validate_ai(self, config: RequestConfig) -> None:
        """
        Проверяет ключ и параметры подключения.

        Args:
            config: Конфигурация запроса

        Raises:
            AiClientError: Если подключение не рабочее
        """
        result = await self.router.validate(config)
        if result.is_success:
            self._logger.info(f"Подключение к {config.provider.value} проверено")
        else:
            self._log_failure("Проверка подключения не пройдена", config, result.error)
        result.unwrap()

    async def translate(self, config: RequestConfig, prompt: str) -> str:
        """
        Запрашивает объяснение задания.

        Args:
            config: Конфигурация запроса
            prompt: Текст задания

        Returns:
            Ответ модели

        Raises:
            AiClientError: Если ответ не получен
        """
        result = await self.router.translate(config, prompt)
        if result.is_success:
            self._logger.debug(f"Получен ответ от {config.provider.value}: {len(result.value)} символов")
        else:
            self._log_failure("Ошибка получения объяснения", config, result.error)
        return result.unwrap()

    def _log_failure(self, action: str, config: RequestConfig, error: AiClientError) -> None:
        if isinstance(error, AiUnauthorizedError):
            self._logger.warning(f"{action} ({config.provider.value}): доступ запрещен: {error}")
        else:
            self._logger.error(f"{action} ({config.provider.value}): {type(error).__name__}: {error}")


# Глобальный экземпляр сервиса
ai_client_service = AiClientService()
