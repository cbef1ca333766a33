"""Contratos (Protocols) usados pelo app.

Evita dependência direta da camada api/ fora do bootstrap.
"""

from app.protocols.mail_sender import MailSenderProtocol

__all__ = ["MailSenderProtocol"]
