"""Configuração centralizada de logging.

Uso:
    from config.logging import configure_logging, get_logger

    # Uma vez, no bootstrap (app/bootstrap)
    configure_logging(level="INFO", service_name="mailgun_sender")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.debug("mailgun_send_success", extra={"status_code": 200})

Logs estruturados, sem PII (endereços, corpo, credenciais).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter
from config.settings.base import DEFAULT_SERVICE_NAME

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

# Loggers de terceiros ruidosos em DEBUG
_QUIET_LOGGERS = ("httpx", "httpcore")


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado no root logger.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo (geralmente __name__)."""
    return logging.getLogger(name)
