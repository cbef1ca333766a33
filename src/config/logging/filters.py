"""Filter de logging que injeta contexto em cada record.

Campos injetados:
- correlation_id: ID do envio corrente. MailgunHttpClient.send abre um
  correlation_scope por chamada, então os eventos mailgun_message_rejected,
  mailgun_send_failed e mailgun_send_success de um mesmo envio compartilham
  o mesmo id.
- service: nome do serviço (BaseSettings.service_name)

Instalado no handler pelo configure_logging, chamado em app/bootstrap.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service sem filtrar nenhum record.

    Um correlation_id passado explicitamente via `extra` é preservado.
    Nunca anexar endereços, corpo de mensagem ou API keys aos logs.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", None):
            record.correlation_id = self._get_correlation_id()
        record.service = self._service_name
        return True
