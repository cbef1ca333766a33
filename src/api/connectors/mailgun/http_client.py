"""Cliente HTTP para envio de mensagens via API Mailgun.

Uma chamada síncrona por envio:
- Validação local (nenhum request se inválida)
- Serialização em formulário multipart (api/payload_builders/mailgun)
- Basic Auth com usuário fixo "api" e a API key
- POST único em <api_base_url>/<domain>/messages
- Interpretação do JSON {"message": ..., "id": ...}

Sem retries: qualquer falha é levantada ao chamador.
"""

from __future__ import annotations

import os
from contextlib import ExitStack
from typing import TYPE_CHECKING, Any

import httpx

from api.connectors.mailgun.mailgun_logging import (
    log_message_rejected,
    log_send_failure,
    log_send_success,
)
from api.connectors.mailgun.models import SendMessageResponse, parse_send_response
from api.payload_builders.mailgun import build_form_payload
from api.validators.mailgun import MailgunMessageValidator
from app.observability import correlation_scope
from config.settings.mailgun import MAILGUN_BASIC_AUTH_USER
from utils.errors import TransportError, ValidationError

if TYPE_CHECKING:
    from api.payload_builders.mailgun import FormPayload
    from app.domain.outbound_email import FileReference, Message
    from config.settings.mailgun import MailgunSettings


class MailgunHttpClient:
    """Cliente da API Mailgun para um domínio de envio.

    O httpx.Client injetado pertence ao chamador; sem injeção, um cliente
    próprio é criado e liberado em close() (ou via context manager).
    """

    def __init__(
        self,
        settings: MailgunSettings,
        http_client: httpx.Client | None = None,
        validator: MailgunMessageValidator | None = None,
    ) -> None:
        """Inicializa cliente Mailgun.

        Args:
            settings: Domínio, API key e URL base
            http_client: Cliente httpx opcional (testes, transporte customizado)
            validator: Validador de mensagens (padrão: MailgunMessageValidator)
        """
        self._settings = settings
        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.Client(
            timeout=settings.request_timeout_seconds,
        )
        self._validator = validator or MailgunMessageValidator()

    @property
    def domain(self) -> str:
        return self._settings.domain

    @property
    def api_key(self) -> str:
        return self._settings.api_key

    @property
    def messages_endpoint(self) -> str:
        return self._settings.get_messages_endpoint()

    def close(self) -> None:
        if self._owns_http_client:
            self._http_client.close()

    def __enter__(self) -> MailgunHttpClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def send(self, message: Message) -> SendMessageResponse:
        """Enfileira uma mensagem para entrega.

        A mensagem não é alterada e pode ser reenviada.

        Args:
            message: Mensagem montada pelo chamador

        Returns:
            SendMessageResponse com status legível e id da mensagem

        Raises:
            ValidationError: Mensagem inválida (nenhum request feito)
            TransportError: Falha de conexão, status não-2xx ou JSON inválido
        """
        with correlation_scope():
            try:
                self._validator.validate(message)
            except ValidationError as exc:
                log_message_rejected(exc.violations)
                raise

            payload = build_form_payload(message)
            endpoint = self.messages_endpoint
            response = self._post(endpoint, payload)
            return self._process_response(response, endpoint)

    def _post(self, endpoint: str, payload: FormPayload) -> httpx.Response:
        """Executa o POST multipart; arquivos abertos aqui são fechados ao sair.

        Campos de texto vão como partes sem filename, então o corpo é sempre
        multipart/form-data, com ou sem anexos.
        """
        with ExitStack() as stack:
            try:
                uploads = [
                    (name, _open_file(reference, stack))
                    for name, reference in payload.files
                ]
            except OSError as exc:
                log_send_failure(endpoint, "attachment_unavailable")
                raise TransportError(f"attachment unavailable: {exc}") from exc

            try:
                response = self._http_client.post(
                    endpoint,
                    files=payload.as_multipart_fields() + uploads,
                    auth=(MAILGUN_BASIC_AUTH_USER, self._settings.api_key),
                )
            except httpx.HTTPError as exc:
                log_send_failure(endpoint, type(exc).__name__)
                raise TransportError(f"mailgun request failed: {exc}") from exc

        if not response.is_success:
            log_send_failure(endpoint, "http_status", response.status_code)
            raise TransportError(
                f"mailgun returned HTTP {response.status_code}",
                status_code=response.status_code,
            )
        return response

    def _process_response(
        self,
        response: httpx.Response,
        endpoint: str,
    ) -> SendMessageResponse:
        try:
            result = parse_send_response(response.json())
        except ValueError as exc:
            log_send_failure(endpoint, "invalid_response", response.status_code)
            raise TransportError(
                f"invalid mailgun response: {exc}",
                status_code=response.status_code,
            ) from exc

        log_send_success(endpoint, response.status_code, result.id)
        return result


def _open_file(reference: FileReference, stack: ExitStack) -> Any:
    """Abre caminhos em disco; arquivos já abertos são usados como estão."""
    if isinstance(reference, (str, os.PathLike)):
        return stack.enter_context(open(reference, "rb"))  # noqa: SIM115
    return reference


def create_mailgun_http_client(
    settings: MailgunSettings | None = None,
    http_client: httpx.Client | None = None,
) -> MailgunHttpClient:
    """Factory para criar cliente Mailgun com config padrão.

    Args:
        settings: MailgunSettings opcional. Se None, carrega do ambiente.
        http_client: Cliente httpx opcional.

    Returns:
        Cliente configurado para o domínio de envio.
    """
    # Import local para evitar dependência circular
    from config.settings import get_mailgun_settings

    return MailgunHttpClient(
        settings=settings or get_mailgun_settings(),
        http_client=http_client,
    )
