"""
YandexGPT провайдер.
Реализует AiProviderAdapter для Yandex Cloud Foundation Models API.
"""
from typing import Any, Dict, List, Optional

import httpx

from quiz_ai.domain.entities.ai_request import ChatMessage, RequestConfig
from .base import (
    AiProviderAdapter, AiResult, AiConfigurationError, AiNoContentError, AiUnauthorizedError,
    DEFAULT_TIMEOUT, PING_PROMPT, ROLE_PROMPT,
)
from .response_classifier import classify_response, classify_transport_failure

DEFAULT_YANDEX_MODEL = "yandexgpt"
YANDEX_TEMPERATURE = 0.5

YANDEX_BASE_URL = "https://llm.api.cloud.yandex.net/foundationModels/v1"


def _extract_alternatives(body: Dict[str, Any]) -> List[Any]:
    result = body.get("result")
    alternatives = result.get("alternatives") if isinstance(result, dict) else None
    return alternatives if isinstance(alternatives, list) else []


def _extract_validation(body: Dict[str, Any]) -> None:
    if not _extract_alternatives(body):
        raise AiUnauthorizedError()


def _extract_translation(body: Dict[str, Any]) -> str:
    alternatives = _extract_alternatives(body)
    first = alternatives[0] if alternatives else None
    message = first.get("message") if isinstance(first, dict) else None
    text = message.get("text") if isinstance(message, dict) else None
    if not text:
        raise AiNoContentError()
    return text


class YandexGPTProvider(AiProviderAdapter):
    """
    Провайдер для YandexGPT.
    Требует идентификатор каталога; без него запрос не отправляется.
    """

    def __init__(
        self,
        base_url: str = YANDEX_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        super().__init__(base_url, timeout, http_client)

    @property
    def provider_name(self) -> str:
        return "yandex"

    def build_request(self, config: RequestConfig, messages: List[ChatMessage]) -> Dict[str, Any]:
        """Тело запроса completion; параметры генерации одинаковы для всех вызовов"""
        model = config.model_or(DEFAULT_YANDEX_MODEL)
        return {
            "modelUri": f"gpt://{config.folder_id}/{model}",
            "completionOptions": {
                "stream": False,
                "temperature": YANDEX_TEMPERATURE,
            },
            "messages": [{"role": msg.role, "text": msg.content} for msg in messages],
        }

    async def validate(self, config: RequestConfig) -> AiResult[None]:
        messages = [ChatMessage(role="user", content=PING_PROMPT)]
        return await self._send(config, messages, _extract_validation)

    async def translate(self, config: RequestConfig, prompt: str) -> AiResult[str]:
        # Инструкция склеивается с заданием без разделителя, одним сообщением
        messages = [ChatMessage(role="user", content=ROLE_PROMPT + prompt)]
        return await self._send(config, messages, _extract_translation)

    async def _send(self, config: RequestConfig, messages: List[ChatMessage], extract) -> AiResult:
        if not config.has_folder():
            return AiResult.failure(AiConfigurationError("Folder ID is required for YandexGPT"))

        header_error = self._check_header_values(api_key=config.api_key, api_folder=config.folder_id)
        if header_error is not None:
            return AiResult.failure(header_error)

        request_data = self.build_request(config, messages)
        headers = {
            "Authorization": f"Api-Key {config.api_key}",
            "x-folder-id": config.folder_id,
            "Content-Type": "application/json",
        }

        self._logger.debug(
            f"Отправка запроса к YandexGPT: {request_data['modelUri']}, {len(messages)} сообщений"
        )

        async with self._http_session() as client:
            try:
                response = await client.post(
                    f"{self.base_url}/completion",
                    json=request_data,
                    headers=headers,
                )
            except httpx.RequestError as e:
                return classify_transport_failure(e)

        return classify_response(response, extract)
