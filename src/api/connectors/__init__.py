"""Connectors: adapters de borda para APIs externas.

Estrutura:
- mailgun/: API HTTP do Mailgun (envio de mensagens)
"""

__all__: list[str] = []
