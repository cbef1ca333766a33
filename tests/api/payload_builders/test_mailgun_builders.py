"""Testes para api/payload_builders/mailgun."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from api.payload_builders.mailgun import (
    FormPayload,
    build_form_payload,
    format_delivery_time,
    yes_no,
)
from app.domain.outbound_email import Message

OPTION_FIELDS = (
    "o:dkim",
    "o:testmode",
    "o:tracking",
    "o:tracking-clicks",
    "o:tracking-opens",
    "o:deliverytime",
    "html",
)


class TestMinimalPayload:
    def test_minimal_message_fields(self, minimal_message: Message) -> None:
        payload = build_form_payload(minimal_message)

        assert payload.fields == [
            ("from", "a@example.com"),
            ("subject", "hi"),
            ("text", "hello"),
            ("to", "b@example.com"),
        ]
        assert payload.files == []
        for name in OPTION_FIELDS:
            assert payload.values(name) == []


class TestRepeatedFields:
    def test_lists_become_repeated_values(self, minimal_message: Message) -> None:
        minimal_message.add_recipient("c@example.com")
        minimal_message.add_cc("cc@example.com")
        minimal_message.add_bcc("bcc@example.com")
        minimal_message.add_tag("welcome")
        minimal_message.add_tag("onboarding")
        minimal_message.add_campaign("spring")

        payload = build_form_payload(minimal_message)

        assert payload.values("to") == ["b@example.com", "c@example.com"]
        assert payload.values("cc") == ["cc@example.com"]
        assert payload.values("bcc") == ["bcc@example.com"]
        assert payload.values("o:tag") == ["welcome", "onboarding"]
        assert payload.values("o:campaign") == ["spring"]

    def test_as_multipart_fields_keeps_order_without_filename(self, minimal_message: Message) -> None:
        minimal_message.add_recipient("c@example.com")
        parts = build_form_payload(minimal_message).as_multipart_fields()

        assert parts == [
            ("from", (None, "a@example.com")),
            ("subject", (None, "hi")),
            ("text", (None, "hello")),
            ("to", (None, "b@example.com")),
            ("to", (None, "c@example.com")),
        ]


class TestOptionalFields:
    def test_tracking_opens_false_is_sent_as_no(self, minimal_message: Message) -> None:
        minimal_message.set_tracking_opens(False)
        payload = build_form_payload(minimal_message)
        assert payload.values("o:tracking-opens") == ["no"]

    def test_tracking_opens_unset_is_omitted(self, minimal_message: Message) -> None:
        assert build_form_payload(minimal_message).values("o:tracking-opens") == []

    def test_tri_state_fields(self, minimal_message: Message) -> None:
        minimal_message.set_dkim(True)
        minimal_message.set_tracking(False)
        minimal_message.set_tracking_clicks(True)

        payload = build_form_payload(minimal_message)

        assert payload.values("o:dkim") == ["yes"]
        assert payload.values("o:tracking") == ["no"]
        assert payload.values("o:tracking-clicks") == ["yes"]
        assert payload.values("o:tracking-opens") == []

    def test_html_only_when_non_empty(self, minimal_message: Message) -> None:
        minimal_message.set_html("")
        assert build_form_payload(minimal_message).values("html") == []

        minimal_message.set_html("<b>hello</b>")
        assert build_form_payload(minimal_message).values("html") == ["<b>hello</b>"]

    def test_test_mode(self, minimal_message: Message) -> None:
        minimal_message.enable_test_mode()
        assert build_form_payload(minimal_message).values("o:testmode") == ["yes"]

    def test_delivery_time(self, minimal_message: Message) -> None:
        minimal_message.set_delivery_time(datetime(2026, 1, 2, 15, 4, 5, tzinfo=UTC))
        assert build_form_payload(minimal_message).values("o:deliverytime") == [
            "Fri, 2 Jan 2026 15:04:05 UTC"
        ]

    def test_headers_and_variables_are_prefixed(self, minimal_message: Message) -> None:
        minimal_message.add_header("X-Priority", "1")
        minimal_message.add_variable("order", {"id": 7})

        payload = build_form_payload(minimal_message)

        assert payload.values("h:X-Priority") == ["1"]
        assert payload.values("v:order") == ['{"id":7}']

    def test_attachments_and_inlines_become_files(self, minimal_message: Message) -> None:
        minimal_message.add_attachment("/tmp/a.pdf")
        minimal_message.add_attachment("/tmp/b.pdf")
        minimal_message.add_inline("/tmp/logo.png")

        payload = build_form_payload(minimal_message)

        assert payload.files == [
            ("attachment", "/tmp/a.pdf"),
            ("attachment", "/tmp/b.pdf"),
            ("inline", "/tmp/logo.png"),
        ]


class TestFormatDeliveryTime:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (datetime(2006, 1, 2, 15, 4, 5, tzinfo=UTC), "Mon, 2 Jan 2006 15:04:05 UTC"),
            (
                datetime(2026, 1, 15, 9, 30, 0, tzinfo=ZoneInfo("America/New_York")),
                "Thu, 15 Jan 2026 09:30:00 EST",
            ),
            (
                datetime(2026, 3, 9, 23, 59, 59, tzinfo=timezone(timedelta(hours=-3))),
                "Mon, 9 Mar 2026 23:59:59 -0300",
            ),
            (
                datetime(2026, 3, 9, 7, 0, 0, tzinfo=timezone(timedelta(hours=5, minutes=30))),
                "Mon, 9 Mar 2026 07:00:00 +0530",
            ),
        ],
    )
    def test_layout(self, value: datetime, expected: str) -> None:
        assert format_delivery_time(value) == expected


def test_yes_no() -> None:
    assert yes_no(True) == "yes"
    assert yes_no(False) == "no"


def test_form_payload_starts_empty() -> None:
    payload = FormPayload()
    assert payload.fields == []
    assert payload.files == []
    assert payload.as_multipart_fields() == []


def test_naive_delivery_time_is_treated_as_local_time() -> None:
    naive = datetime(2026, 10, 18, 8, 0, 0)
    local = naive.astimezone()

    assert format_delivery_time(naive) == format_delivery_time(local)
    assert format_delivery_time(naive).startswith("Sun, 18 Oct 2026 08:00:00 ")
