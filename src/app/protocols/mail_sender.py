"""Protocolos de envio de e-mail transacional."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from api.connectors.mailgun.models import SendMessageResponse
    from app.domain.outbound_email import Message


class MailSenderProtocol(Protocol):
    """Contrato mínimo para enviar uma Message e obter status + id."""

    def send(self, message: Message) -> SendMessageResponse: ...

    def close(self) -> None: ...
