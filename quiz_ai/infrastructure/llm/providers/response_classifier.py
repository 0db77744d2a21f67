"""
Единая политика разбора HTTP ответов провайдеров.
Превращает статус и тело ответа в значение или типизированную ошибку.
"""
from typing import Any, Callable, Dict, TypeVar

import httpx

from .base import AiClientError, AiResult, AiTransportError, AiUnauthorizedError

T = TypeVar("T")

UNAUTHORIZED_STATUSES = frozenset({401, 403})


def _reason(response: httpx.Response) -> str:
    return response.reason_phrase or str(response.status_code)


def classify_response(
    response: httpx.Response,
    extract: Callable[[Dict[str, Any]], T],
) -> AiResult[T]:
    """
    Классифицирует ответ провайдера.

    401/403 всегда означают отказ в доступе, независимо от тела.
    Остальные неуспешные статусы и пустое тело при успехе дают AiTransportError.
    Успешное тело передается в extract провайдера, который может
    сам вернуть AiUnauthorizedError или AiNoContentError.

    Args:
        response: HTTP ответ провайдера
        extract: Функция извлечения значения из JSON тела

    Returns:
        AiResult со значением или ошибкой
    """
    status = response.status_code

    if status in UNAUTHORIZED_STATUSES:
        return AiResult.failure(AiUnauthorizedError(_reason(response)))

    if not response.is_success or not response.content:
        return AiResult.failure(AiTransportError(status, _reason(response)))

    try:
        body = response.json()
    except ValueError as e:
        return AiResult.failure(AiTransportError(status, f"Некорректный JSON в ответе: {e}"))

    if not isinstance(body, dict):
        return AiResult.failure(AiTransportError(status, "Неожиданный формат ответа"))

    try:
        return AiResult.success(extract(body))
    except AiClientError as e:
        return AiResult.failure(e)


def classify_transport_failure(error: Exception) -> AiResult[Any]:
    """Ошибка до получения ответа: таймаут, обрыв соединения и т.п."""
    return AiResult.failure(AiTransportError(None, f"{type(error).__name__}: {error}"))
