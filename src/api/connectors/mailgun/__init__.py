"""Conector Mailgun: adapter de borda para a API HTTP do Mailgun.

Único ponto de IO para envio de e-mail transacional.
Responsabilidades:
- HTTP client (POST multipart com Basic Auth)
- Modelo de resposta (status + id)
- Logging sem PII
"""

from .http_client import MailgunHttpClient, create_mailgun_http_client
from .models import SendMessageResponse, parse_send_response

__all__ = [
    "MailgunHttpClient",
    "SendMessageResponse",
    "create_mailgun_http_client",
    "parse_send_response",
]
