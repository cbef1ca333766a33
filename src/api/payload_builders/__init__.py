"""Payload builders: construção de payloads para APIs externas.

Estrutura:
- mailgun/: formulário multipart de /messages
"""

__all__: list[str] = []
