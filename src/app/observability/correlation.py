"""Correlation id por envio, injetado nos logs via CorrelationIdFilter.

MailgunHttpClient.send envolve validação, POST e leitura da resposta em
correlation_scope(): todos os logs de um envio carregam o mesmo id. Um
chamador que já definiu um id (ex: id do pedido que gerou o e-mail) tem
esse id reaproveitado em vez de um novo UUID.

Usa ContextVar para ser thread/async-safe.

Uso:
    from app.observability import correlation_scope

    with correlation_scope() as correlation_id:
        client.send(message)
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual ("" se não definido)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Args:
        correlation_id: ID a definir. Se None, gera um novo UUID.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    return _correlation_id.set(correlation_id or str(uuid.uuid4()))


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id ao valor anterior."""
    _correlation_id.reset(token)


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Garante um correlation_id durante o bloco.

    Um id já ativo no contexto é reaproveitado; caso contrário um novo é
    definido e removido ao sair.
    """
    current = get_correlation_id()
    if current and correlation_id is None:
        yield current
        return

    token = set_correlation_id(correlation_id)
    try:
        yield get_correlation_id()
    finally:
        reset_correlation_id(token)
