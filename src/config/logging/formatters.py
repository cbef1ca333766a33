"""Formatter JSON dos logs do cliente Mailgun.

Todo record sai com os campos de REQUIRED_LOG_FIELDS, já renomeados
conforme FIELD_RENAME_MAP. Campos passados via `extra` são anexados.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

# Nomes publicados no JSON
FIELD_RENAME_MAP = {
    "asctime": "timestamp",
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "timestamp": "2026-10-18T10:30:00+0000",
            "level": "DEBUG",
            "logger": "api.connectors.mailgun.http_client",
            "message": "mailgun_send_success",
            "correlation_id": "6f1c...",
            "service": "mailgun_sender",
            "status_code": 200
        }
    """
    format_string = " ".join(f"%({name})s" for name in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )
