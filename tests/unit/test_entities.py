"""
Тесты для сущностей запроса и подключения.
"""
import dataclasses

import pytest

from quiz_ai.config.settings import Settings
from quiz_ai.domain.entities.ai_connection import (
    AiConnection, AiConnectionNotConfiguredError, AiConnectionProviderType,
)
from quiz_ai.domain.entities.ai_request import ProviderKind, RequestConfig


class TestRequestConfig:
    """Тесты для RequestConfig"""

    @pytest.mark.parametrize("model", [None, "", " \t"])
    def test_blank_model_uses_default(self, model):
        config = RequestConfig(provider=ProviderKind.OPENAI, api_key="k", model=model)
        assert config.model_or("gpt-5.1") == "gpt-5.1"

    def test_explicit_model(self):
        config = RequestConfig(provider=ProviderKind.OPENAI, api_key="k", model="gpt-4o")
        assert config.model_or("gpt-5.1") == "gpt-4o"

    @pytest.mark.parametrize("folder,expected", [(None, False), ("", False), ("  ", False), ("b1g", True)])
    def test_has_folder(self, folder, expected):
        config = RequestConfig(provider=ProviderKind.YANDEX, api_key="k", api_folder=folder)
        assert config.has_folder() is expected

    def test_frozen(self):
        config = RequestConfig(provider=ProviderKind.OPENAI, api_key="k")
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.model = "gpt-4o"

    def test_repr_hides_api_key(self):
        config = RequestConfig(provider=ProviderKind.OPENAI, api_key="sk-secret")
        assert "sk-secret" not in repr(config)


class TestAiConnection:
    """Тесты для AiConnection"""

    def test_chat_gpt_maps_to_openai(self):
        connection = AiConnection(AiConnectionProviderType.CHAT_GPT, api_key="sk", model="gpt-4o")

        config = connection.to_request_config()

        assert config == RequestConfig(provider=ProviderKind.OPENAI, api_key="sk", model="gpt-4o")

    def test_yandex_keeps_folder(self):
        connection = AiConnection(AiConnectionProviderType.YANDEX, api_key="yc", api_cloud_folder="b1g")

        assert connection.to_request_config().api_folder == "b1g"

    def test_none_not_configured(self):
        with pytest.raises(AiConnectionNotConfiguredError):
            AiConnection(AiConnectionProviderType.NONE, api_key="").to_request_config()

    @pytest.mark.parametrize("value,expected", [
        (None, AiConnectionProviderType.NONE),
        ("", AiConnectionProviderType.NONE),
        ("chat_gpt", AiConnectionProviderType.CHAT_GPT),
        (" YANDEX ", AiConnectionProviderType.YANDEX),
    ])
    def test_from_setting(self, value, expected):
        assert AiConnectionProviderType.from_setting(value) is expected

    def test_from_setting_unknown(self):
        with pytest.raises(ValueError):
            AiConnectionProviderType.from_setting("gigachat")


class TestSettingsConnection:
    """Тесты сборки подключения из переменных окружения"""

    def test_active_connection_from_env(self, monkeypatch):
        monkeypatch.setenv("AI_PROVIDER", "yandex")
        monkeypatch.setenv("AI_API_KEY", "yc-key")
        monkeypatch.setenv("AI_API_FOLDER", "b1gfolder")
        monkeypatch.delenv("AI_MODEL", raising=False)

        connection = Settings().active_ai_connection

        assert connection.provider_type is AiConnectionProviderType.YANDEX
        assert connection.is_active is True
        assert connection.api_cloud_folder == "b1gfolder"
        assert connection.model is None

    def test_no_provider_inactive(self, monkeypatch):
        monkeypatch.delenv("AI_PROVIDER", raising=False)

        connection = Settings().active_ai_connection

        assert connection.provider_type is AiConnectionProviderType.NONE
        assert connection.is_active is False

    def test_default_timeout(self, monkeypatch):
        monkeypatch.delenv("AI_CLIENT_TIMEOUT", raising=False)
        assert Settings().ai_client_timeout == 45.0
