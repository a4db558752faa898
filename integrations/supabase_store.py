"""Client for the hosted ``payment_requests`` table (Supabase / PostgREST).

Only row-level create, read, update and ordered listing are used. The HTTP
session is injectable so tests can hand in a stub returning canned
``requests.Response`` objects.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Protocol, Sequence

import requests
from pydantic import ValidationError
from requests import Response

import config as app_config
from core.errors import RecordNotFound, StoreConfigurationError, StoreError
from models.payment_request import NewPaymentRequest, PaymentRequest

logger = logging.getLogger(__name__)

_ORDERABLE_COLUMNS: frozenset[str] = frozenset({"created_at", "amount", "payment_date", "status"})
_UPDATABLE_COLUMNS: frozenset[str] = frozenset(
    {"amount", "description", "recipient", "status", "payment_method", "payment_date", "note"}
)


class RecordStore(Protocol):
    """Operations the app needs from the payment request store."""

    def create(self, request: NewPaymentRequest) -> PaymentRequest: ...

    def get(self, record_id: str) -> PaymentRequest: ...

    def update(self, record_id: str, fields: Mapping[str, Any]) -> None: ...

    def list(self, *, order_by: str = "created_at", descending: bool = True) -> list[PaymentRequest]: ...


class _Session(Protocol):
    def request(self, method: str, url: str, **kwargs: Any) -> Response: ...


class SupabaseRecordStore:
    """``RecordStore`` backed by the PostgREST API of a Supabase project."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        table: str = app_config.PAYMENT_REQUESTS_TABLE,
        timeout: float = app_config.STORE_REQUEST_TIMEOUT,
        session: _Session | None = None,
    ) -> None:
        if not base_url or not api_key:
            raise StoreConfigurationError("Supabase configuration is missing")
        self._endpoint = f"{base_url.rstrip('/')}/rest/v1/{table}"
        self._timeout = timeout
        self._session: _Session = session or requests.Session()
        self._headers = {
            "apikey": api_key,
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
            "x-client-info": app_config.CLIENT_INFO,
        }

    @classmethod
    def from_config(cls, *, session: _Session | None = None) -> "SupabaseRecordStore":
        """Build a store from ``SUPABASE_URL`` / ``SUPABASE_ANON_KEY``."""

        return cls(app_config.SUPABASE_URL, app_config.SUPABASE_ANON_KEY, session=session)

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def create(self, request: NewPaymentRequest) -> PaymentRequest:
        """Insert ``request`` and return the stored row."""

        response = self._send(
            "POST",
            json=request.to_payload(),
            headers={"Prefer": "return=representation"},
        )
        rows = self._rows(response)
        if not rows:
            raise StoreError("The store did not return the created payment request.")
        record = self._parse(rows[0])
        logger.info("Created payment request %s", record.id)
        return record

    def get(self, record_id: str) -> PaymentRequest:
        """Return the row with ``record_id`` or raise :class:`RecordNotFound`."""

        if not record_id:
            raise RecordNotFound(record_id)
        response = self._send("GET", params={"select": "*", "id": f"eq.{record_id}", "limit": "1"})
        rows = self._rows(response)
        if not rows:
            raise RecordNotFound(record_id)
        return self._parse(rows[0])

    def update(self, record_id: str, fields: Mapping[str, Any]) -> None:
        """Patch ``fields`` on the row with ``record_id``."""

        unknown = set(fields) - _UPDATABLE_COLUMNS
        if unknown:
            raise StoreError(f"Cannot update columns: {', '.join(sorted(unknown))}")
        response = self._send(
            "PATCH",
            params={"id": f"eq.{record_id}"},
            json=dict(fields),
            headers={"Prefer": "return=representation"},
        )
        if response.status_code != 204 and not self._rows(response):
            raise RecordNotFound(record_id)

    def list(self, *, order_by: str = "created_at", descending: bool = True) -> list[PaymentRequest]:
        """Return all rows ordered by ``order_by``, skipping rows that fail validation."""

        if order_by not in _ORDERABLE_COLUMNS:
            raise StoreError(f"Cannot order payment requests by '{order_by}'")
        direction = "desc" if descending else "asc"
        response = self._send("GET", params={"select": "*", "order": f"{order_by}.{direction}"})
        records: list[PaymentRequest] = []
        for row in self._rows(response):
            try:
                records.append(self._parse(row))
            except StoreError as exc:
                logger.warning("Skipping payment request %s: %s", row.get("id"), exc.details)
        return records

    def _send(
        self,
        method: str,
        *,
        params: Mapping[str, str] | None = None,
        json: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Response:
        merged_headers = {**self._headers, **(headers or {})}
        try:
            response = self._session.request(
                method,
                self._endpoint,
                params=dict(params or {}),
                json=json,
                headers=merged_headers,
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            logger.warning("Store request %s failed: %s", method, exc)
            raise StoreError(f"Could not reach the payment request store: {exc}") from exc
        logger.debug("Store %s %s -> %s", method, self._endpoint, response.status_code)
        if response.status_code >= 400:
            raise self._error_from_response(response)
        return response

    @staticmethod
    def _error_from_response(response: Response) -> StoreError:
        try:
            body = response.json()
        except ValueError:
            body = None
        if not isinstance(body, Mapping):
            body = {}
        message = body.get("message") or response.text or f"HTTP {response.status_code}"
        error = StoreError(
            str(message),
            code=body.get("code"),
            details=body.get("details"),
            hint=body.get("hint"),
            status_code=response.status_code,
        )
        logger.warning(
            "Store error: status=%s code=%s message=%s details=%s hint=%s",
            response.status_code,
            error.code,
            message,
            error.details,
            error.hint,
        )
        return error

    @staticmethod
    def _rows(response: Response) -> Sequence[Mapping[str, Any]]:
        if response.status_code == 204 or not response.content:
            return []
        try:
            payload = response.json()
        except ValueError as exc:
            raise StoreError("The store returned malformed JSON.") from exc
        if isinstance(payload, Mapping):
            return [payload]
        if isinstance(payload, list):
            return [row for row in payload if isinstance(row, Mapping)]
        raise StoreError("The store returned an unexpected payload.")

    @staticmethod
    def _parse(row: Mapping[str, Any]) -> PaymentRequest:
        try:
            return PaymentRequest.model_validate(dict(row))
        except ValidationError as exc:
            raise StoreError("The store returned an invalid payment request.", details=str(exc)) from exc


__all__ = [
    "RecordStore",
    "SupabaseRecordStore",
]
