"""
Роуты прямого подключения к AI.
Проверка ключа провайдера и объяснение задания через активное подключение.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ....config.settings import Settings, get_settings
from ....domain.entities.ai_request import ProviderKind, RequestConfig
from ....domain.services.ai_explanation import AiExplanationService, ai_explanation_service
from ....infrastructure.llm.providers import (
    AiConfigurationError, AiNoContentError, AiTransportError, AiUnauthorizedError,
)
from ....infrastructure.llm.services.ai_client_service import AiClientService, ai_client_service

ai_router = APIRouter(prefix="/api/ai", tags=["ai-client"])

logger = logging.getLogger(__name__)


class AiConnectionTestRequest(BaseModel):
    """Параметры подключения для проверки"""
    provider: ProviderKind = Field(..., description="AI провайдер (openai, yandex)")
    api_key: str = Field(..., description="Ключ API")
    api_folder: Optional[str] = Field(None, description="Каталог Yandex Cloud")
    model: Optional[str] = Field(None, description="Модель; пусто - модель по умолчанию")

    def to_request_config(self) -> RequestConfig:
        return RequestConfig(
            provider=self.provider,
            api_key=self.api_key,
            api_folder=self.api_folder,
            model=self.model,
        )


class ExplainRequest(BaseModel):
    """Запрос объяснения задания"""
    prompt: str = Field(..., min_length=1, description="Текст задания")
    fallback_web_link: Optional[str] = Field(None, description="Ссылка для открытия в браузере")


def get_ai_client_service(request: Request) -> AiClientService:
    """Сервис из состояния приложения, иначе глобальный"""
    return getattr(request.app.state, "ai_client_service", None) or ai_client_service


def get_ai_explanation_service(request: Request) -> AiExplanationService:
    return getattr(request.app.state, "ai_explanation_service", None) or ai_explanation_service


@ai_router.post("/validate")
async def validate_connection(
    payload: AiConnectionTestRequest,
    service: AiClientService = Depends(get_ai_client_service),
):
    """
    Тестирование подключения к AI провайдеру
    """
    try:
        await service.validate_ai(payload.to_request_config())
        return JSONResponse(content={
            "success": True,
            "message": f"Подключение к {payload.provider.value} работает"
        })

    except AiConfigurationError as e:
        return JSONResponse(status_code=400, content={"success": False, "error": str(e)})

    except AiUnauthorizedError as e:
        return JSONResponse(
            status_code=401,
            content={"success": False, "error": f"Неверный ключ API или доступ запрещен: {e}"}
        )

    except (AiNoContentError, AiTransportError) as e:
        return JSONResponse(
            status_code=502,
            content={"success": False, "error": f"Ошибка провайдера: {e}"}
        )


@ai_router.post("/explain")
async def explain_assignment(
    payload: ExplainRequest,
    service: AiExplanationService = Depends(get_ai_explanation_service),
    settings: Settings = Depends(get_settings),
):
    """
    Объяснение задания через активное подключение.
    Всегда отвечает 200; при ошибке is_warning=true и ссылка для открытия в браузере.
    """
    fallback_web_link = payload.fallback_web_link or settings.ai_fallback_web_link or None

    try:
        connection = settings.active_ai_connection
    except ValueError as e:
        logger.error(f"Некорректные настройки подключения к AI: {e}")
        connection = None

    result = await service.explain(
        connection=connection,
        prompt=payload.prompt,
        fallback_web_link=fallback_web_link,
    )
    return JSONResponse(content={
        "success": not result.is_warning,
        "markdown": result.markdown,
        "is_warning": result.is_warning,
        "show_error_message": result.show_error_message,
        "is_unauthorized": result.is_unauthorized,
        "fallback_web_link": result.fallback_web_link,
    })
