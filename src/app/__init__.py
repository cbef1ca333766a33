"""App: domínio, wiring e observabilidade do cliente Mailgun.

Subpastas:
- bootstrap/: composition root (logging, validação de settings, factories)
- domain/: Message (acumulador do e-mail de saída)
- protocols/: contratos/interfaces
- observability/: correlation_id para logs estruturados

Padrão: app monta e executa; api adapta (valida, serializa, transmite).
"""
