"""Testes para config.settings (base + mailgun)."""

from __future__ import annotations

import pytest

from config.settings import (
    MAILGUN_API_BASE_URL,
    BaseSettings,
    MailgunSettings,
    get_base_settings,
    get_mailgun_settings,
)


class TestMailgunSettings:
    def test_defaults(self) -> None:
        settings = MailgunSettings()
        assert settings.api_base_url == MAILGUN_API_BASE_URL == "https://api.mailgun.net/v2"
        assert settings.request_timeout_seconds == 30.0

    def test_messages_endpoint(self) -> None:
        settings = MailgunSettings(domain="mg.example.com", api_base_url="https://api.eu.mailgun.net/v3/")
        assert settings.get_messages_endpoint() == "https://api.eu.mailgun.net/v3/mg.example.com/messages"
        assert settings.get_messages_endpoint("other.example.com").endswith("/other.example.com/messages")

    def test_messages_endpoint_requires_domain(self) -> None:
        with pytest.raises(ValueError, match="domain"):
            MailgunSettings().get_messages_endpoint()

    def test_validate_reports_missing_credentials(self) -> None:
        errors = MailgunSettings(request_timeout_seconds=0).validate()
        assert "MAILGUN_DOMAIN não configurado" in errors
        assert "MAILGUN_API_KEY não configurado" in errors
        assert "MAILGUN_REQUEST_TIMEOUT_SECONDS deve ser > 0" in errors

    def test_validate_ok(self, mailgun_settings: MailgunSettings) -> None:
        assert mailgun_settings.validate() == []

    def test_load_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAILGUN_DOMAIN", "mg.example.com")
        monkeypatch.setenv("MAILGUN_API_KEY", "key-env")
        monkeypatch.setenv("MAILGUN_REQUEST_TIMEOUT_SECONDS", "5")

        settings = get_mailgun_settings()

        assert settings.domain == "mg.example.com"
        assert settings.api_key == "key-env"
        assert settings.request_timeout_seconds == 5.0
        assert get_mailgun_settings() is settings


class TestBaseSettings:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("prod", "production"), ("STAGE", "staging"), ("anything", "development")],
    )
    def test_environment_parsing(
        self,
        monkeypatch: pytest.MonkeyPatch,
        raw: str,
        expected: str,
    ) -> None:
        monkeypatch.setenv("ENVIRONMENT", raw)
        assert get_base_settings().environment == expected

    def test_debug_raises_default_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        assert get_base_settings().log_level == "DEBUG"

    def test_strict_environments(self) -> None:
        assert BaseSettings(environment="production").is_strict
        assert BaseSettings(environment="staging").is_strict
        assert not BaseSettings().is_strict
        assert BaseSettings(service_name="").validate() == ["SERVICE_NAME não pode ser vazio"]
