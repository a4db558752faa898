"""Compose and deliver the share message for a freshly created request."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol
from urllib.parse import quote

import config as app_config
from core.errors import ShareTargetUnavailable
from models.payment_request import PaymentRequest
from utils.normalization import format_amount, format_phone_e164, phone_digits

logger = logging.getLogger(__name__)

CLIPBOARD_NOTICE = "Could not open WhatsApp. Message copied to clipboard. Please paste in WhatsApp manually."


class ShareTarget(Protocol):
    """Where a share message ends up: an external app or the clipboard."""

    def open_url(self, url: str) -> None:
        """Open ``url`` in an external app; raise ``ShareTargetUnavailable`` on failure."""

    def copy_to_clipboard(self, text: str) -> None: ...


@dataclass(frozen=True)
class ShareResult:
    """What happened when a request was shared."""

    link: str
    message: str
    opened_url: str | None = None
    copied_to_clipboard: bool = False
    notice: str | None = None


def build_share_link(record_id: str, *, host: str | None = None) -> str:
    """Return ``https://<host>/request/<id>`` for ``record_id``."""

    share_host = (host or app_config.SHARE_HOST).strip("/")
    return f"https://{share_host}/request/{quote(str(record_id), safe='')}"


def compose_share_message(request: PaymentRequest, link: str) -> str:
    """Return the human readable message sent to the recipient."""

    return (
        f"Payment Request from {app_config.APP_NAME}\n"
        f"Sender: {request.sender} ({format_phone_e164(request.sender_phone)})\n"
        f"Recipient: {request.recipient}\n"
        f"Amount: {format_amount(request.amount)}\n"
        f"Description: {request.description}\n"
        f"Pay here: {link}"
    )


def build_whatsapp_urls(phone: str, message: str) -> tuple[str, ...]:
    """Return WhatsApp deep links for ``phone``, most compatible first."""

    digits = phone_digits(format_phone_e164(phone))
    if not digits:
        return ()
    encoded = quote(message, safe="")
    return (
        f"https://wa.me/{digits}?text={encoded}",
        f"whatsapp://send?phone={digits}&text={encoded}",
    )


def share_request(
    request: PaymentRequest,
    target: ShareTarget,
    *,
    host: str | None = None,
) -> ShareResult:
    """Send ``request`` to the recipient via WhatsApp, falling back to the clipboard."""

    link = build_share_link(request.id, host=host)
    message = compose_share_message(request, link)
    for url in build_whatsapp_urls(request.recipient_phone, message):
        try:
            target.open_url(url)
        except ShareTargetUnavailable as exc:
            logger.warning("Failed to open share target %s: %s", url.split("?", 1)[0], exc)
            continue
        logger.info("Shared payment request %s", request.id)
        return ShareResult(link=link, message=message, opened_url=url)

    target.copy_to_clipboard(message)
    logger.info("Copied share message for request %s to the clipboard", request.id)
    return ShareResult(link=link, message=message, copied_to_clipboard=True, notice=CLIPBOARD_NOTICE)


__all__ = [
    "CLIPBOARD_NOTICE",
    "ShareResult",
    "ShareTarget",
    "build_share_link",
    "build_whatsapp_urls",
    "compose_share_message",
    "share_request",
]
