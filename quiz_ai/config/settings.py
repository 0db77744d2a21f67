"""
Настройки приложения через переменные окружения
"""
import os

from quiz_ai.domain.entities.ai_connection import AiConnection, AiConnectionProviderType


class Settings:
    """Основные настройки приложения"""

    def __init__(self):
        # Основные
        self.environment: str = os.getenv("ENVIRONMENT", "production")
        self.debug: bool = os.getenv("DEBUG", "false").lower() == "true"
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO")

        # Адреса API провайдеров
        self.openai_base_url: str = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")
        self.yandex_base_url: str = os.getenv(
            "YANDEX_BASE_URL", "https://llm.api.cloud.yandex.net/foundationModels/v1"
        )

        # Единый таймаут connect/read/write/pool в секундах
        self.ai_client_timeout: float = float(os.getenv("AI_CLIENT_TIMEOUT", "45"))

        # Текущее подключение к AI
        self.ai_provider: str = os.getenv("AI_PROVIDER", "none")
        self.ai_api_key: str = os.getenv("AI_API_KEY", "")
        self.ai_api_folder: str = os.getenv("AI_API_FOLDER", "")
        self.ai_model: str = os.getenv("AI_MODEL", "")
        self.ai_fallback_web_link: str = os.getenv("AI_FALLBACK_WEB_LINK", "")

    @property
    def active_ai_connection(self) -> AiConnection:
        """Подключение к AI, собранное из переменных окружения"""
        provider_type = AiConnectionProviderType.from_setting(self.ai_provider)
        return AiConnection(
            provider_type=provider_type,
            api_key=self.ai_api_key,
            api_cloud_folder=self.ai_api_folder or None,
            model=self.ai_model or None,
            is_active=provider_type is not AiConnectionProviderType.NONE,
        )


# Глобальный экземпляр настроек (lazy initialization)
_settings_instance = None

def get_settings() -> Settings:
    """Получить экземпляр настроек (создается при первом обращении)"""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance

settings = get_settings()
