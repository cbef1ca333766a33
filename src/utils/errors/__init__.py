"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    MailgunError,
    SerializationError,
    TransportError,
    ValidationError,
)

__all__ = [
    "MailgunError",
    "SerializationError",
    "TransportError",
    "ValidationError",
]
