"""Settings base do serviço.

Configurações comuns independentes do provedor de e-mail.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

DEFAULT_SERVICE_NAME = "mailgun_sender"


@dataclass(frozen=True)
class BaseSettings:
    """Configurações base do sistema.

    Attributes:
        environment: Ambiente de execução (development|staging|production)
        service_name: Nome do serviço para logs
        debug: Modo debug ativo
        log_level: Nível de log do root logger
    """

    environment: Environment = "development"
    service_name: str = DEFAULT_SERVICE_NAME
    debug: bool = False
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente é produção."""
        return self.environment == "production"

    @property
    def is_strict(self) -> bool:
        """Staging e produção falham rápido com configuração inválida."""
        return self.environment in ("staging", "production")

    def validate(self) -> list[str]:
        """Valida configurações base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        return errors


def _parse_environment(env_str: str) -> Environment:
    """Converte string de ambiente para tipo Environment."""
    env_lower = env_str.lower()
    if env_lower in ("production", "prod"):
        return "production"
    if env_lower in ("staging", "stage"):
        return "staging"
    return "development"


def _load_base_from_env() -> BaseSettings:
    """Carrega BaseSettings de variáveis de ambiente."""
    debug = os.getenv("DEBUG", "").lower() in ("true", "1", "yes")
    return BaseSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", DEFAULT_SERVICE_NAME),
        debug=debug,
        log_level=os.getenv("LOG_LEVEL", "DEBUG" if debug else "INFO").upper(),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
