"""Modelo de domínio para e-mail transacional de saída (Mailgun).

Acumulador mutável: cada mutator altera um único campo, sem validação.
A validação acontece apenas no envio (api/validators/mailgun).

Campos tri-state (dkim, tracking, tracking_clicks, tracking_opens) usam
`bool | None`: None = não informado (omitido no envio), False = "no".
"""

from __future__ import annotations

import json
import os
from datetime import datetime
from typing import Any, BinaryIO, Union

from utils.errors import SerializationError

# Caminho em disco ou arquivo binário já aberto
FileReference = Union[str, os.PathLike, BinaryIO]


class Message:
    """E-mail de saída ainda não transmitido.

    Listas começam como None (ausentes) e são criadas no primeiro append;
    uma lista vazia presente é inválida no envio.

    Exemplo:
        message = Message("a@example.com", "hi", "hello", "b@example.com")
        message.add_tag("welcome")
        message.set_tracking_opens(False)
    """

    def __init__(self, from_: str, subject: str, text: str, *to: str) -> None:
        self.from_ = from_
        self.subject = subject
        self.text = text
        self.to: list[str] | None = list(to) if to else None
        self.cc: list[str] | None = None
        self.bcc: list[str] | None = None
        self.html = ""
        self.tags: list[str] | None = None
        self.campaigns: list[str] | None = None
        self.dkim: bool | None = None
        self.delivery_time: datetime | None = None
        self.attachments: list[FileReference] | None = None
        self.inlines: list[FileReference] | None = None
        self.test_mode = False
        self.tracking: bool | None = None
        self.tracking_clicks: bool | None = None
        self.tracking_opens: bool | None = None
        self.headers: dict[str, str] | None = None
        self.variables: dict[str, str] | None = None

    def __repr__(self) -> str:
        # Sem endereços ou corpo (PII)
        return (
            f"Message(to={len(self.to or [])}, cc={len(self.cc or [])}, "
            f"bcc={len(self.bcc or [])}, attachments={len(self.attachments or [])})"
        )

    # ── Destinatários ────────────────────────────────────────────────

    def add_recipient(self, recipient: str) -> None:
        self.to = _append(self.to, recipient)

    def add_cc(self, recipient: str) -> None:
        self.cc = _append(self.cc, recipient)

    def add_bcc(self, recipient: str) -> None:
        self.bcc = _append(self.bcc, recipient)

    # ── Corpo e metadados ────────────────────────────────────────────

    def set_html(self, html: str) -> None:
        """Define corpo HTML alternativo (enviado apenas se não vazio)."""
        self.html = html

    def add_tag(self, tag: str) -> None:
        """Anexa uma tag, usada pelo Mailgun para métricas e eventos."""
        self.tags = _append(self.tags, tag)

    def add_campaign(self, campaign: str) -> None:
        self.campaigns = _append(self.campaigns, campaign)

    def add_attachment(self, attachment: FileReference) -> None:
        self.attachments = _append(self.attachments, attachment)

    def add_inline(self, inline: FileReference) -> None:
        self.inlines = _append(self.inlines, inline)

    # ── Opções tri-state ─────────────────────────────────────────────

    def set_dkim(self, dkim: bool) -> None:
        self.dkim = dkim

    def set_tracking(self, tracking: bool) -> None:
        """Controla reescrita de URLs para tracking (o:tracking).

        Chamar o setter sempre envia o campo, inclusive com False.
        """
        self.tracking = tracking

    def set_tracking_clicks(self, tracking_clicks: bool) -> None:
        self.tracking_clicks = tracking_clicks

    def set_tracking_opens(self, tracking_opens: bool) -> None:
        self.tracking_opens = tracking_opens

    # ── Agendamento e modo de teste ──────────────────────────────────

    def enable_test_mode(self) -> None:
        """Mailgun aceita a mensagem mas não a entrega."""
        self.test_mode = True

    def set_delivery_time(self, delivery_time: datetime) -> None:
        """Agenda a transmissão, substituindo agendamento anterior.

        Datetime sem timezone é tratado como horário local (astimezone())
        ao serializar; prefira datetimes com tzinfo para evitar ambiguidade.
        """
        self.delivery_time = delivery_time

    # ── Headers e variáveis ──────────────────────────────────────────

    def add_header(self, header: str, value: str) -> None:
        if self.headers is None:
            self.headers = {}
        self.headers[header] = value

    def add_variable(self, variable: str, value: Any) -> None:
        """Adiciona variável customizada já serializada como JSON.

        O valor original é descartado: só o texto JSON é armazenado.

        Args:
            variable: Nome da variável (enviada como v:<nome>)
            value: Qualquer valor serializável em JSON

        Raises:
            SerializationError: Se o valor não puder ser codificado
        """
        try:
            encoded = json.dumps(value, separators=(",", ":"), allow_nan=False)
        except (TypeError, ValueError, RecursionError) as exc:
            raise SerializationError(
                f"variable {variable!r} is not JSON serializable: {exc}"
            ) from exc
        if self.variables is None:
            self.variables = {}
        self.variables[variable] = encoded


def _append(values: list[Any] | None, value: Any) -> list[Any]:
    if values is None:
        return [value]
    values.append(value)
    return values
