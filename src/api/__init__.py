"""API: camada de borda para a API HTTP do Mailgun.

Subpastas:
- connectors/: cliente HTTP (envio, autenticação, resposta)
- payload_builders/: Message → formulário multipart
- validators/: validação estrutural antes do envio

NÃO PODE conter: regras de domínio além das exigidas pelo provedor.
"""
