"""
Общие fixtures для всех тестов
"""
import json
from typing import Any, Dict, List, Optional

import httpx
import pytest
import pytest_asyncio

from quiz_ai.domain.entities.ai_request import ProviderKind, RequestConfig
from quiz_ai.infrastructure.llm.providers import OpenAIProvider, YandexGPTProvider
from quiz_ai.infrastructure.llm.router import AiProviderRouter


class RecordingTransport:
    """
    Мок HTTP транспорта.
    Запоминает запросы и отвечает предустановленными ответами.
    """

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self._responses: List[httpx.Response] = []
        self._error: Optional[Exception] = None

    def set_response(
        self,
        status_code: int = 200,
        json_body: Any = None,
        content: Optional[bytes] = None,
    ) -> None:
        """Ответ для всех последующих запросов"""
        self._responses = []
        self.add_response(status_code, json_body, content)

    def add_response(
        self,
        status_code: int = 200,
        json_body: Any = None,
        content: Optional[bytes] = None,
    ) -> None:
        """Добавляет ответ в очередь; последний ответ повторяется"""
        if content is None:
            content = json.dumps(json_body).encode() if json_body is not None else b""
        self._responses.append((status_code, content))

    def set_error(self, error: Exception) -> None:
        self._error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._error is not None:
            raise self._error

        if len(self._responses) > 1:
            status_code, content = self._responses.pop(0)
        else:
            status_code, content = self._responses[0]

        return httpx.Response(
            status_code,
            content=content,
            headers={"content-type": "application/json"},
            request=request,
        )

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_json(self) -> Dict[str, Any]:
        return json.loads(self.last_request.content)


def openai_body(*contents: Optional[str]) -> Dict[str, Any]:
    """Тело ответа OpenAI с одним choice на каждый content"""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "gpt-5.1",
        "choices": [
            {
                "index": index,
                "finish_reason": "stop",
                "message": {"role": "assistant", "content": content},
            }
            for index, content in enumerate(contents)
        ],
    }


def yandex_body(*texts: str) -> Dict[str, Any]:
    """Тело ответа YandexGPT с одной альтернативой на каждый text"""
    return {
        "result": {
            "alternatives": [
                {"message": {"role": "assistant", "text": text}, "status": "ALTERNATIVE_STATUS_FINAL"}
                for text in texts
            ],
            "usage": {"inputTextTokens": "10", "completionTokens": "5", "totalTokens": "15"},
            "modelVersion": "23.10.2024",
        }
    }


@pytest.fixture
def make_openai_body():
    return openai_body


@pytest.fixture
def make_yandex_body():
    return yandex_body


@pytest.fixture
def transport() -> RecordingTransport:
    """Мок транспорта с успешным пустым ответом по умолчанию"""
    recording = RecordingTransport()
    recording.set_response(200, {})
    return recording


@pytest_asyncio.fixture
async def http_client(transport):
    """HTTP клиент поверх мок транспорта"""
    async with httpx.AsyncClient(transport=httpx.MockTransport(transport.handler)) as client:
        yield client


@pytest.fixture
def openai_provider(http_client) -> OpenAIProvider:
    return OpenAIProvider(http_client=http_client)


@pytest.fixture
def yandex_provider(http_client) -> YandexGPTProvider:
    return YandexGPTProvider(http_client=http_client)


@pytest.fixture
def router(openai_provider, yandex_provider) -> AiProviderRouter:
    return AiProviderRouter({
        ProviderKind.OPENAI: openai_provider,
        ProviderKind.YANDEX: yandex_provider,
    })


@pytest.fixture
def openai_config() -> RequestConfig:
    return RequestConfig(provider=ProviderKind.OPENAI, api_key="sk-test")


@pytest.fixture
def yandex_config() -> RequestConfig:
    return RequestConfig(provider=ProviderKind.YANDEX, api_key="yc-key", api_folder="b1gfolder")


# Автоматическое применение маркеров
def pytest_collection_modifyitems(config, items):
    """Автоматически применяет маркеры к тестам"""
    for item in items:
        # Определяем тип теста по пути к файлу
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)

        # Добавляем специфичные маркеры
        if "provider" in str(item.fspath) or "router" in str(item.fspath):
            item.add_marker(pytest.mark.llm)
        if "api" in str(item.fspath):
            item.add_marker(pytest.mark.api)
