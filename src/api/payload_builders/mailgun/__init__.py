"""Builders de payload para a API Mailgun."""

from api.payload_builders.mailgun.form import (
    FormPayload,
    build_form_payload,
    format_delivery_time,
    yes_no,
)

__all__ = [
    "FormPayload",
    "build_form_payload",
    "format_delivery_time",
    "yes_no",
]
