"""Settings específicas do Mailgun.

Configurações do envio de e-mail transacional via API HTTP do Mailgun.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes da API Mailgun
MAILGUN_API_BASE_URL: str = "https://api.mailgun.net/v2"
MAILGUN_BASIC_AUTH_USER: str = "api"
MESSAGES_ENDPOINT: str = "messages"


@dataclass(frozen=True)
class MailgunSettings:
    """Configurações do cliente Mailgun.

    Attributes:
        domain: Domínio de envio cadastrado no Mailgun
        api_key: API key privada (senha do Basic Auth)
        api_base_url: URL base da API (sem barra final)
        request_timeout_seconds: Timeout do transporte HTTP
    """

    # Credenciais (carregadas de env ou Secret Manager)
    domain: str = ""
    api_key: str = ""

    # API
    api_base_url: str = MAILGUN_API_BASE_URL

    # Transporte
    request_timeout_seconds: float = 30.0

    def get_messages_endpoint(self, domain: str | None = None) -> str:
        """Retorna URL para envio de mensagens.

        Args:
            domain: Domínio de envio. Usa self.domain se None.

        Returns:
            URL completa no formato: https://api.mailgun.net/v2/{domain}/messages

        Raises:
            ValueError: Se domain não informado e não configurado.
        """
        target = domain or self.domain
        if not target:
            raise ValueError("domain é obrigatório")
        return f"{self.api_base_url.rstrip('/')}/{target}/{MESSAGES_ENDPOINT}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas do Mailgun.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.domain:
            errors.append("MAILGUN_DOMAIN não configurado")

        if not self.api_key:
            errors.append("MAILGUN_API_KEY não configurado")

        if not self.api_base_url.startswith(("https://", "http://")):
            errors.append("MAILGUN_API_BASE_URL deve ser uma URL http(s)")

        if self.request_timeout_seconds <= 0:
            errors.append("MAILGUN_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> MailgunSettings:
    """Carrega MailgunSettings a partir de variáveis de ambiente."""
    return MailgunSettings(
        domain=os.getenv("MAILGUN_DOMAIN", ""),
        api_key=os.getenv("MAILGUN_API_KEY", ""),
        api_base_url=os.getenv("MAILGUN_API_BASE_URL", MAILGUN_API_BASE_URL),
        request_timeout_seconds=float(
            os.getenv("MAILGUN_REQUEST_TIMEOUT_SECONDS", "30")
        ),
    )


@lru_cache(maxsize=1)
def get_mailgun_settings() -> MailgunSettings:
    """Retorna instância cacheada de MailgunSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
