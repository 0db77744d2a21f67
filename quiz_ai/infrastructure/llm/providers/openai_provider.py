"""
OpenAI провайдер.
Реализует AiProviderAdapter поверх Chat Completions API.
"""
from typing import Any, Dict, List, Optional

import httpx
import openai
from openai import AsyncOpenAI

from quiz_ai.domain.entities.ai_request import ChatMessage, RequestConfig
from .base import (
    AiProviderAdapter, AiResult, AiNoContentError, AiUnauthorizedError,
    DEFAULT_TIMEOUT, PING_PROMPT, ROLE_PROMPT,
)
from .response_classifier import classify_response, classify_transport_failure

# Модель с поддержкой reasoning_effort, она же модель по умолчанию
REASONING_MODEL = "gpt-5.1"
DEFAULT_OPENAI_MODEL = REASONING_MODEL
REASONING_EFFORT = "high"

OPENAI_BASE_URL = "https://api.openai.com/v1"


def _extract_choices(body: Dict[str, Any]) -> List[Any]:
    choices = body.get("choices")
    return choices if isinstance(choices, list) else []


def _extract_validation(body: Dict[str, Any]) -> None:
    if not _extract_choices(body):
        raise AiUnauthorizedError()


def _extract_translation(body: Dict[str, Any]) -> str:
    choices = _extract_choices(body)
    first = choices[0] if choices else None
    message = first.get("message") if isinstance(first, dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    if content is None:
        raise AiNoContentError()
    return content


class OpenAIProvider(AiProviderAdapter):
    """
    Провайдер для OpenAI GPT моделей.
    Проверка ключа и объяснение задания через Chat Completions.
    """

    def __init__(
        self,
        base_url: str = OPENAI_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        super().__init__(base_url, timeout, http_client)

    @property
    def provider_name(self) -> str:
        return "openai"

    def build_request(self, config: RequestConfig, messages: List[ChatMessage]) -> Dict[str, Any]:
        """
        Формирует параметры запроса.
        reasoning_effort добавляется только для REASONING_MODEL, для остальных ключ отсутствует.
        """
        model = config.model_or(DEFAULT_OPENAI_MODEL)
        request: Dict[str, Any] = {
            "model": model,
            "messages": [{"role": msg.role, "content": msg.content} for msg in messages],
        }
        if model == REASONING_MODEL:
            request["reasoning_effort"] = REASONING_EFFORT
        return request

    async def validate(self, config: RequestConfig) -> AiResult[None]:
        messages = [ChatMessage(role="user", content=PING_PROMPT)]
        return await self._send(config, messages, _extract_validation)

    async def translate(self, config: RequestConfig, prompt: str) -> AiResult[str]:
        messages = [
            ChatMessage(role="system", content=ROLE_PROMPT),
            ChatMessage(role="user", content=prompt),
        ]
        return await self._send(config, messages, _extract_translation)

    async def _send(self, config: RequestConfig, messages: List[ChatMessage], extract) -> AiResult:
        header_error = self._check_header_values(api_key=config.api_key)
        if header_error is not None:
            return AiResult.failure(header_error)

        request = self.build_request(config, messages)

        self._logger.debug(
            f"Отправка запроса к OpenAI: модель {request['model']}, {len(messages)} сообщений"
        )

        async with self._http_session() as http_client:
            # Клиент SDK не закрываем: он использует общий http_client
            client = AsyncOpenAI(
                api_key=config.api_key,
                base_url=self.base_url,
                timeout=self.timeout,
                max_retries=0,
                http_client=http_client,
            )
            try:
                raw = await client.chat.completions.with_raw_response.create(**request)
            except openai.APIStatusError as e:
                return classify_response(e.response, extract)
            except openai.APIConnectionError as e:
                return classify_transport_failure(e)

        return classify_response(raw.http_response, extract)
