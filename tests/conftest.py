"""Configuração do pytest para o cliente Mailgun."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from app.domain.outbound_email import Message  # noqa: E402
from config.settings import (  # noqa: E402
    MailgunSettings,
    get_base_settings,
    get_mailgun_settings,
)


@pytest.fixture
def minimal_message() -> Message:
    """Mensagem mínima válida."""
    return Message("a@example.com", "hi", "hello", "b@example.com")


@pytest.fixture
def mailgun_settings() -> MailgunSettings:
    return MailgunSettings(domain="mg.example.com", api_key="key-test")


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_base_settings.cache_clear()
    get_mailgun_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_mailgun_settings.cache_clear()
