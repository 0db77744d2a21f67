"""
Главный файл приложения FastAPI
Health check endpoint и роуты AI клиента
"""
from contextlib import asynccontextmanager
from datetime import datetime

import httpx
from fastapi import FastAPI

from quiz_ai.config.settings import settings
from quiz_ai.domain.services.ai_explanation import AiExplanationService
from quiz_ai.infrastructure.llm.router import build_router
from quiz_ai.infrastructure.llm.services.ai_client_service import AiClientService
from quiz_ai.infrastructure.logging.console_logger import setup_logging
from quiz_ai.application.web.routes.ai_client import ai_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Один HTTP клиент на всё время жизни приложения"""
    logger = setup_logging(settings.log_level)
    logger.info(f"Запуск приложения (environment={settings.environment})")

    async with httpx.AsyncClient(timeout=httpx.Timeout(settings.ai_client_timeout)) as http_client:
        client_service = AiClientService(build_router(settings, http_client=http_client))
        app.state.ai_client_service = client_service
        app.state.ai_explanation_service = AiExplanationService(client_service)
        yield

    logger.info("Приложение остановлено")


app = FastAPI(
    title="Quiz AI Client",
    debug=settings.debug,
    lifespan=lifespan,
)

app.include_router(ai_router)


@app.get("/health")
async def health_check():
    """Проверка состояния приложения"""
    return {
        "status": "healthy",
        "environment": settings.environment,
        "timestamp": datetime.now().isoformat(),
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "quiz_ai.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level=settings.log_level.lower()
    )
