"""Builder do formulário multipart enviado ao endpoint /messages.

Achata uma Message em pares (nome, valor) e (nome, arquivo) na ordem em
que o Mailgun os recebe. Nomes repetidos são todos transmitidos.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from api.payload_builders.mailgun import fields as wire

if TYPE_CHECKING:
    from app.domain.outbound_email import FileReference, Message

# Abreviações fixas em inglês (independente de locale)
_DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


@dataclass
class FormPayload:
    """Payload achatado: campos de texto e uploads de arquivo.

    Attributes:
        fields: Pares (nome de campo, valor) em ordem de envio
        files: Pares (nome de campo, referência de arquivo)
    """

    fields: list[tuple[str, str]] = field(default_factory=list)
    files: list[tuple[str, FileReference]] = field(default_factory=list)

    def add_value(self, name: str, value: str) -> None:
        self.fields.append((name, value))

    def add_file(self, name: str, reference: FileReference) -> None:
        self.files.append((name, reference))

    def values(self, name: str) -> list[str]:
        """Todos os valores enviados sob um nome de campo."""
        return [value for key, value in self.fields if key == name]

    def as_multipart_fields(self) -> list[tuple[str, tuple[None, str]]]:
        """Campos de texto no formato de partes sem filename (`files=` do httpx)."""
        return [(name, (None, value)) for name, value in self.fields]


def yes_no(value: bool) -> str:
    """Converte booleano no formato yes/no da API Mailgun."""
    return "yes" if value else "no"


def format_delivery_time(value: datetime) -> str:
    """Formata no layout "Mon, 2 Jan 2006 15:04:05 MST".

    Datetime sem timezone é interpretado como horário local e convertido
    com astimezone(). Zonas sem abreviação (offset fixo) saem como +hhmm.
    """
    if value.tzinfo is None:
        value = value.astimezone()
    return (
        f"{_DAY_NAMES[value.weekday()]}, {value.day} "
        f"{_MONTH_NAMES[value.month - 1]} {value.year:04d} "
        f"{value:%H:%M:%S} {_zone_abbreviation(value)}"
    )


def _zone_abbreviation(value: datetime) -> str:
    offset = value.utcoffset()
    name = value.tzname()
    if offset is None or name is None:
        return "UTC"
    if name.startswith("UTC") and offset != timedelta(0):
        total_minutes = int(offset.total_seconds()) // 60
        sign = "+" if total_minutes >= 0 else "-"
        hours, minutes = divmod(abs(total_minutes), 60)
        return f"{sign}{hours:02d}{minutes:02d}"
    return name


def build_form_payload(message: Message) -> FormPayload:
    """Constrói o formulário de envio a partir de uma mensagem já validada.

    Args:
        message: Mensagem a ser enviada

    Returns:
        FormPayload com campos e arquivos na ordem de envio
    """
    payload = FormPayload()
    payload.add_value(wire.FIELD_FROM, message.from_)
    payload.add_value(wire.FIELD_SUBJECT, message.subject)
    payload.add_value(wire.FIELD_TEXT, message.text)

    repeated = (
        (wire.FIELD_TO, message.to),
        (wire.FIELD_CC, message.cc),
        (wire.FIELD_BCC, message.bcc),
        (wire.FIELD_TAG, message.tags),
        (wire.FIELD_CAMPAIGN, message.campaigns),
    )
    for name, values in repeated:
        for value in values or ():
            payload.add_value(name, value)

    if message.html:
        payload.add_value(wire.FIELD_HTML, message.html)
    if message.dkim is not None:
        payload.add_value(wire.FIELD_DKIM, yes_no(message.dkim))
    if message.delivery_time is not None:
        payload.add_value(
            wire.FIELD_DELIVERY_TIME, format_delivery_time(message.delivery_time)
        )
    if message.test_mode:
        payload.add_value(wire.FIELD_TEST_MODE, "yes")

    tri_state = (
        (wire.FIELD_TRACKING, message.tracking),
        (wire.FIELD_TRACKING_CLICKS, message.tracking_clicks),
        (wire.FIELD_TRACKING_OPENS, message.tracking_opens),
    )
    for name, flag in tri_state:
        if flag is not None:
            payload.add_value(name, yes_no(flag))

    for header, value in (message.headers or {}).items():
        payload.add_value(f"{wire.HEADER_PREFIX}{header}", value)
    for variable, value in (message.variables or {}).items():
        payload.add_value(f"{wire.VARIABLE_PREFIX}{variable}", value)

    for attachment in message.attachments or ():
        payload.add_file(wire.FIELD_ATTACHMENT, attachment)
    for inline in message.inlines or ():
        payload.add_file(wire.FIELD_INLINE, inline)

    return payload
