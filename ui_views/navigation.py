"""Switch between views by rewriting the query parameters."""

from __future__ import annotations

import streamlit as st

from ui_views.routes import Route, resolve_route


def current_route() -> Route:
    """Return the route for this run from the query parameters or the page URL."""

    return resolve_route(st.query_params.to_dict(), getattr(st.context, "url", None))


def go_to(route: Route) -> None:
    """Point the query parameters at ``route`` and rerun the script."""

    st.query_params.clear()
    st.query_params.update(route.query_params())
    st.rerun()


__all__ = ["current_route", "go_to"]
