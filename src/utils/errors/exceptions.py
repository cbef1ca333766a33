"""Exceções do cliente Mailgun.

Todas derivam de MailgunError para permitir um único `except` no chamador.
"""

from __future__ import annotations


class MailgunError(Exception):
    """Base para falhas do cliente Mailgun."""


class SerializationError(MailgunError, ValueError):
    """Valor de variável customizada não representável em JSON."""


class ValidationError(MailgunError, ValueError):
    """Mensagem não passou na validação estrutural antes do envio.

    Attributes:
        violations: Regras violadas (ex: "to_required", "text_required")
    """

    def __init__(self, violations: list[str] | None = None) -> None:
        self.violations = list(violations or [])
        detail = ", ".join(self.violations)
        message = "message not valid"
        super().__init__(f"{message}: {detail}" if detail else message)


class TransportError(MailgunError):
    """Falha na troca HTTP com a API Mailgun.

    A causa original (httpx ou JSON) fica encadeada em __cause__.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
