"""Map URL paths and query parameters onto the BuzzPay views.

Share links carry the view in the URL path (``/request/<id>``). Inside the
app, navigation rewrites the query parameters instead, either
``?view=pay&id=<id>`` or ``?path=/request/<id>/pay``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Mapping
from urllib.parse import unquote, urlsplit


class View(StrEnum):
    CREATE = "create"
    REQUEST = "request"
    PAY = "pay"
    RECEIPT = "receipt"
    DASHBOARD = "dashboard"


_VIEWS_WITH_ID = frozenset({View.REQUEST, View.PAY, View.RECEIPT})


@dataclass(frozen=True)
class Route:
    """A resolved view plus the request id it operates on."""

    view: View
    request_id: str | None = None

    @property
    def path(self) -> str:
        if self.view is View.CREATE:
            return "/create"
        if self.view is View.DASHBOARD:
            return "/dashboard"
        base = f"/request/{self.request_id}"
        if self.view is View.REQUEST:
            return base
        return f"{base}/{self.view.value}"

    def query_params(self) -> dict[str, str]:
        """Return the query parameters that lead back to this route."""

        params = {"view": self.view.value}
        if self.request_id:
            params["id"] = self.request_id
        return params


DEFAULT_ROUTE = Route(View.CREATE)


def parse_path(path: str | None) -> Route:
    """Return the :class:`Route` for ``path``; unknown paths fall back to create."""

    parts = [unquote(part) for part in (path or "").strip().split("/") if part]
    if not parts or parts == ["create"]:
        return DEFAULT_ROUTE
    if parts == ["dashboard"]:
        return Route(View.DASHBOARD)
    if parts[0] == "request" and len(parts) in (2, 3):
        request_id = parts[1]
        if len(parts) == 2:
            return Route(View.REQUEST, request_id)
        if parts[2] == "pay":
            return Route(View.PAY, request_id)
        if parts[2] == "receipt":
            return Route(View.RECEIPT, request_id)
    return DEFAULT_ROUTE


def _first(params: Mapping[str, object], key: str) -> str | None:
    value = params.get(key)
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def from_query_params(params: Mapping[str, object]) -> Route:
    """Resolve the current route from Streamlit query parameters."""

    path = _first(params, "path")
    if path:
        return parse_path(path)
    view_name = _first(params, "view")
    try:
        view = View(view_name) if view_name else View.CREATE
    except ValueError:
        return DEFAULT_ROUTE
    if view in _VIEWS_WITH_ID:
        request_id = _first(params, "id")
        if request_id is None:
            return DEFAULT_ROUTE
        return Route(view, request_id)
    return Route(view)


def resolve_route(params: Mapping[str, object], url: str | None = None) -> Route:
    """Resolve the route from query parameters, falling back to the URL path.

    Query parameters win because in-app navigation only rewrites them, while
    the path of a shared link (``/request/<id>``) stays in the address bar.
    """

    if _first(params, "path") or _first(params, "view"):
        return from_query_params(params)
    if url:
        return parse_path(urlsplit(url).path)
    return DEFAULT_ROUTE


__all__ = [
    "DEFAULT_ROUTE",
    "Route",
    "View",
    "from_query_params",
    "parse_path",
    "resolve_route",
]
