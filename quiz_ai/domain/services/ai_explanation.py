"""
Сервис объяснения заданий через активное подключение к AI.
Любая ошибка превращается в предупреждение со ссылкой для открытия в браузере.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from ..entities.ai_connection import AiConnection, AiConnectionNotConfiguredError
from ...infrastructure.llm.providers import AiClientError, AiUnauthorizedError
from ...infrastructure.llm.services.ai_client_service import AiClientService, ai_client_service


@dataclass(frozen=True)
class ExplanationResult:
    """Состояние экрана объяснения после запроса"""
    markdown: str
    is_warning: bool
    show_error_message: bool
    is_unauthorized: bool
    fallback_web_link: Optional[str] = None


class AiExplanationService:
    """
    Сервис для получения объяснения задания.
    Ошибки не пробрасываются: вызывающая сторона всегда получает ExplanationResult.
    """

    def __init__(self, client_service: Optional[AiClientService] = None) -> None:
        self._client_service = client_service or ai_client_service
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    async def explain(
        self,
        connection: Optional[AiConnection],
        prompt: str,
        fallback_web_link: Optional[str] = None,
    ) -> ExplanationResult:
        """
        Запрашивает объяснение задания у активного провайдера.

        Args:
            connection: Текущее подключение к AI или None
            prompt: Текст задания
            fallback_web_link: Ссылка для открытия запроса в браузере

        Returns:
            ExplanationResult с текстом или предупреждением
        """
        try:
            if connection is None or not connection.is_active:
                raise AiConnectionNotConfiguredError("Нет активного подключения к AI")

            config = connection.to_request_config()
            markdown = await self._client_service.translate(config, prompt)

            return ExplanationResult(
                markdown=markdown,
                is_warning=False,
                show_error_message=False,
                is_unauthorized=False,
                fallback_web_link=fallback_web_link,
            )

        except (AiConnectionNotConfiguredError, AiClientError) as e:
            self._logger.error(f"Ошибка получения объяснения: {type(e).__name__}: {e}")
            return ExplanationResult(
                markdown="",
                is_warning=True,
                show_error_message=True,
                is_unauthorized=isinstance(e, AiUnauthorizedError),
                fallback_web_link=fallback_web_link,
            )

        except Exception as e:
            self._logger.exception(f"Непредвиденная ошибка получения объяснения: {type(e).__name__}: {e}")
            return ExplanationResult(
                markdown="",
                is_warning=True,
                show_error_message=True,
                is_unauthorized=False,
                fallback_web_link=fallback_web_link,
            )


# Глобальный экземпляр сервиса
ai_explanation_service = AiExplanationService()
