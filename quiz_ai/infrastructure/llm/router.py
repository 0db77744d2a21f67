"""
Маршрутизатор AI провайдеров.
Выбирает адаптер по config.provider для каждого запроса.
"""
import logging
from typing import Dict, Mapping, Optional

import httpx

from quiz_ai.config.settings import Settings, get_settings
from quiz_ai.domain.entities.ai_request import ProviderKind, RequestConfig
from .providers import AiProviderAdapter, AiResult, OpenAIProvider, YandexGPTProvider


class AiProviderRouter:
    """
    Диспетчер запросов к провайдерам.
    Таблица адаптеров должна покрывать все значения ProviderKind.
    """

    def __init__(self, adapters: Mapping[ProviderKind, AiProviderAdapter]) -> None:
        """
        Args:
            adapters: Адаптер для каждого ProviderKind

        Raises:
            ValueError: Если для какого-то провайдера нет адаптера
        """
        missing = [kind.name for kind in ProviderKind if kind not in adapters]
        if missing:
            raise ValueError(f"Нет адаптера для провайдеров: {', '.join(missing)}")

        self._adapters: Dict[ProviderKind, AiProviderAdapter] = dict(adapters)
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def adapter_for(self, config: RequestConfig) -> AiProviderAdapter:
        adapter = self._adapters[config.provider]
        self._logger.debug(f"Запрос направлен провайдеру: {adapter.provider_name}")
        return adapter

    async def validate(self, config: RequestConfig) -> AiResult[None]:
        """Проверка подключения выбранным провайдером"""
        return await self.adapter_for(config).validate(config)

    async def translate(self, config: RequestConfig, prompt: str) -> AiResult[str]:
        """Объяснение задания выбранным провайдером"""
        return await self.adapter_for(config).translate(config, prompt)


def build_router(
    settings: Optional[Settings] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> AiProviderRouter:
    """
    Создает маршрутизатор с адаптерами по настройкам окружения.

    Args:
        settings: Настройки; по умолчанию глобальные
        http_client: Общий HTTP клиент для обоих адаптеров
    """
    settings = settings or get_settings()
    return AiProviderRouter({
        ProviderKind.OPENAI: OpenAIProvider(
            base_url=settings.openai_base_url,
            timeout=settings.ai_client_timeout,
            http_client=http_client,
        ),
        ProviderKind.YANDEX: YandexGPTProvider(
            base_url=settings.yandex_base_url,
            timeout=settings.ai_client_timeout,
            http_client=http_client,
        ),
    })
