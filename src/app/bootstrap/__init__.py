"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
conecta o cliente Mailgun concreto ao MailSenderProtocol.

Uso:
    from app.bootstrap import initialize_app, get_mail_sender

    initialize_app()
    sender = get_mail_sender()
    result = sender.send(message)
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_mailgun_settings

if TYPE_CHECKING:
    from app.protocols import MailSenderProtocol

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa logging estruturado conforme BaseSettings.

    Deve ser chamada uma vez no início do processo.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Inicializa logging em DEBUG para testes."""
    base = get_base_settings()
    configure_logging(
        level="DEBUG",
        service_name=f"{base.service_name}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.

    Raises:
        RuntimeError: Configuração inválida em ambiente estrito
    """
    base = get_base_settings()
    errors: list[str] = []
    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"mailgun: {error}" for error in get_mailgun_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.is_strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


@lru_cache(maxsize=1)
def get_mail_sender() -> MailSenderProtocol:
    """Obtém cliente de envio (singleton) configurado pelo ambiente."""
    from api.connectors.mailgun import create_mailgun_http_client

    return create_mailgun_http_client(get_mailgun_settings())
