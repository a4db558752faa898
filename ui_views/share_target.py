"""Browser-side share target used by the create view."""

from __future__ import annotations

import json
import logging
from urllib.parse import urlsplit

import streamlit as st
import streamlit.components.v1 as components

from core.errors import ShareTargetUnavailable

logger = logging.getLogger(__name__)

# Custom schemes such as ``whatsapp://`` are blocked inside the component iframe.
_OPENABLE_SCHEMES: tuple[str, ...] = ("https",)


class StreamlitShareTarget:
    """Open share links in a new tab and copy messages via the browser clipboard."""

    def __init__(self, *, openable_schemes: tuple[str, ...] = _OPENABLE_SCHEMES) -> None:
        self._openable_schemes = openable_schemes

    def open_url(self, url: str) -> None:
        scheme = urlsplit(url).scheme
        if scheme not in self._openable_schemes:
            raise ShareTargetUnavailable(f"Cannot open '{scheme}' links from the browser")
        components.html(
            f"<script>window.open({json.dumps(url)}, '_blank', 'noopener');</script>",
            height=0,
        )
        st.link_button("Open WhatsApp", url, icon="💬")

    def copy_to_clipboard(self, text: str) -> None:
        components.html(
            "<script>"
            f"navigator.clipboard && navigator.clipboard.writeText({json.dumps(text)})"
            ".catch(function () {});"
            "</script>",
            height=0,
        )
        logger.debug("Requested clipboard copy of %d characters", len(text))


__all__ = ["StreamlitShareTarget"]
