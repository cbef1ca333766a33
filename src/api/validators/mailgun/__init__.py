"""Validadores de mensagens para a API Mailgun.

Uso:
    from api.validators.mailgun import MailgunMessageValidator, ValidationError

    validator = MailgunMessageValidator()
    validator.validate(message)
"""

from api.validators.mailgun.limits import MAX_CAMPAIGNS_PER_MESSAGE
from api.validators.mailgun.message import (
    MailgunMessageValidator,
    collect_violations,
    validate_message,
    validate_string_list,
)
from utils.errors import ValidationError

__all__ = [
    "MAX_CAMPAIGNS_PER_MESSAGE",
    "MailgunMessageValidator",
    "ValidationError",
    "collect_violations",
    "validate_message",
    "validate_string_list",
]
