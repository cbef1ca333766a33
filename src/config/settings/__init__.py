"""Agregador de settings do cliente Mailgun.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    DEFAULT_SERVICE_NAME,
    BaseSettings,
    Environment,
    get_base_settings,
)

# Provider settings
from config.settings.mailgun import (
    MAILGUN_API_BASE_URL,
    MAILGUN_BASIC_AUTH_USER,
    MailgunSettings,
    get_mailgun_settings,
)

__all__ = [
    # Constants
    "DEFAULT_SERVICE_NAME",
    "MAILGUN_API_BASE_URL",
    "MAILGUN_BASIC_AUTH_USER",
    # Base
    "BaseSettings",
    "Environment",
    # Provider
    "MailgunSettings",
    "get_base_settings",
    "get_mailgun_settings",
]
