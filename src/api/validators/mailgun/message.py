"""Validação estrutural de mensagens antes do envio ao Mailgun.

Função pura sobre o estado acumulado: retorna a lista de regras violadas
em vez de um booleano opaco. Nenhuma regra interrompe as demais.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.validators.mailgun.limits import MAX_CAMPAIGNS_PER_MESSAGE
from utils.errors import ValidationError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain.outbound_email import Message


def validate_string_list(values: Sequence[str] | None, required: bool) -> bool:
    """Valida lista de strings.

    Válida se ausente (e não obrigatória) ou presente com ao menos um
    item e nenhum item vazio. Lista vazia presente nunca é válida.

    Args:
        values: Lista ou None (ausente)
        required: Se a lista precisa existir

    Returns:
        True se a lista é válida
    """
    if values is None:
        return not required
    return len(values) > 0 and all(values)


def collect_violations(message: Message | None) -> list[str]:
    """Retorna as regras violadas pela mensagem (vazia = válida)."""
    if message is None:
        return ["message_required"]

    violations: list[str] = []
    if not message.from_:
        violations.append("from_required")
    if not validate_string_list(message.to, required=True):
        violations.append("to_invalid")
    if not validate_string_list(message.cc, required=False):
        violations.append("cc_invalid")
    if not validate_string_list(message.bcc, required=False):
        violations.append("bcc_invalid")
    if not validate_string_list(message.tags, required=False):
        violations.append("tags_invalid")
    if not validate_string_list(message.campaigns, required=False):
        violations.append("campaigns_invalid")
    if len(message.campaigns or ()) > MAX_CAMPAIGNS_PER_MESSAGE:
        violations.append("campaigns_limit_exceeded")
    if not message.text:
        violations.append("text_required")
    return violations


def validate_message(message: Message | None) -> bool:
    """True se, e somente se, a mensagem pode ser enviada."""
    return not collect_violations(message)


class MailgunMessageValidator:
    """Validador de mensagens para envio via Mailgun."""

    def validate(self, message: Message | None) -> None:
        """Valida a mensagem.

        Raises:
            ValidationError: Com a lista de regras violadas
        """
        violations = collect_violations(message)
        if violations:
            raise ValidationError(violations)
