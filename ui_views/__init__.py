"""Streamlit UI views exposed for programmatic navigation."""

from . import create_request, dashboard, payment_wall, receipt, request_view

__all__ = [
    "create_request",
    "dashboard",
    "payment_wall",
    "receipt",
    "request_view",
]
