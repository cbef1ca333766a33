"""Helpers de logging para a API Mailgun (sem PII).

Somente contagens, endpoint e status: nunca endereços, corpo ou API key.
Falhas são levantadas ao chamador; estes logs ficam em DEBUG.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_message_rejected(violations: list[str]) -> None:
    """Loga mensagem recusada na validação local (nenhum request feito)."""
    logger.debug(
        "mailgun_message_rejected",
        extra={"violations": violations, "violation_count": len(violations)},
    )


def log_send_success(endpoint: str, status_code: int, message_id: str) -> None:
    logger.debug(
        "mailgun_send_success",
        extra={
            "method": "POST",
            "endpoint": endpoint,
            "status_code": status_code,
            "message_id": message_id,
        },
    )


def log_send_failure(
    endpoint: str,
    reason: str,
    status_code: int | None = None,
) -> None:
    logger.debug(
        "mailgun_send_failed",
        extra={
            "method": "POST",
            "endpoint": endpoint,
            "reason": reason,
            "status_code": status_code,
        },
    )
