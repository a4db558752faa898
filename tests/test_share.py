from __future__ import annotations

from urllib.parse import unquote

from core.share import (
    CLIPBOARD_NOTICE,
    build_share_link,
    build_whatsapp_urls,
    compose_share_message,
    share_request,
)
from models.payment_request import PaymentRequest
from tests.fakes import RecordingShareTarget


def _record(**overrides) -> PaymentRequest:
    fields = {
        "id": "abc123",
        "amount": "25.50",
        "description": "Dinner",
        "recipient": "Bob",
        "sender": "Alice",
        "sender_phone": "5550101111",
        "recipient_phone": "5550102222",
    }
    fields.update(overrides)
    return PaymentRequest(**fields)


def test_share_link_uses_configured_host() -> None:
    assert build_share_link("abc123", host="pay.example") == "https://pay.example/request/abc123"
    assert build_share_link("a/b", host="pay.example/") == "https://pay.example/request/a%2Fb"


def test_message_lists_request_details() -> None:
    record = _record()
    link = build_share_link(record.id, host="buzzpay.co")

    message = compose_share_message(record, link)

    assert message.splitlines() == [
        "Payment Request from BuzzPay",
        "Sender: Alice (+15550101111)",
        "Recipient: Bob",
        "Amount: $25.50",
        "Description: Dinner",
        "Pay here: https://buzzpay.co/request/abc123",
    ]


def test_whatsapp_urls_in_order() -> None:
    urls = build_whatsapp_urls("555 010 2222", "Hi there")

    assert urls == (
        "https://wa.me/15550102222?text=Hi%20there",
        "whatsapp://send?phone=15550102222&text=Hi%20there",
    )
    assert build_whatsapp_urls("", "Hi") == ()


def test_share_opens_first_available_target() -> None:
    target = RecordingShareTarget("https://")

    result = share_request(_record(), target, host="buzzpay.co")

    assert result.opened_url is not None
    assert result.opened_url.startswith("https://wa.me/15550102222?text=")
    assert not result.copied_to_clipboard
    assert result.notice is None
    assert target.clipboard == []
    decoded = unquote(result.opened_url.split("text=", 1)[1])
    assert "$25.50" in decoded
    assert "Bob" in decoded
    assert "/request/abc123" in decoded


def test_share_falls_back_to_whatsapp_scheme() -> None:
    target = RecordingShareTarget("whatsapp://")

    result = share_request(_record(), target)

    assert len(target.attempted) == 2
    assert result.opened_url == target.opened[0]
    assert result.opened_url.startswith("whatsapp://send?phone=15550102222")


def test_share_copies_to_clipboard_when_nothing_opens() -> None:
    target = RecordingShareTarget()

    result = share_request(_record(), target, host="buzzpay.co")

    assert result.copied_to_clipboard
    assert result.notice == CLIPBOARD_NOTICE
    assert target.clipboard == [result.message]
    assert result.link == "https://buzzpay.co/request/abc123"


def test_share_without_recipient_phone_goes_straight_to_clipboard() -> None:
    target = RecordingShareTarget("https://")

    result = share_request(_record(recipient_phone=""), target)

    assert target.attempted == []
    assert result.copied_to_clipboard
