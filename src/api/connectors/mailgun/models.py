"""Modelos de resposta da API Mailgun."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SendMessageResponse:
    """Resposta de POST /messages.

    Attributes:
        message: Status legível (ex: "Queued. Thank you.")
        id: Identificador opaco da mensagem aceita
    """

    message: str
    id: str


def parse_send_response(response_data: Any) -> SendMessageResponse:
    """Extrai status e id do JSON de resposta.

    Chaves ausentes viram string vazia.

    Raises:
        ValueError: Se o corpo não é objeto ou os campos não são strings
    """
    if not isinstance(response_data, dict):
        raise ValueError("response body is not a JSON object")

    message = response_data.get("message", "")
    message_id = response_data.get("id", "")
    if not isinstance(message, str) or not isinstance(message_id, str):
        raise ValueError("response fields 'message' and 'id' must be strings")
    return SendMessageResponse(message=message, id=message_id)
