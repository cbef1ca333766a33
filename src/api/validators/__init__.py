"""Validators: validação de mensagens antes do envio.

Estrutura:
- mailgun/: regras estruturais da API Mailgun
"""

__all__: list[str] = []
