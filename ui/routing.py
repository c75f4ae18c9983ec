"""Query-parameter routing between the landing, list and detail pages."""

from __future__ import annotations

from typing import Mapping, Optional, Tuple

import streamlit as st

HOME = "home"
PROJECTS = "projects"
PROJECT = "project"
PAGES = (HOME, PROJECTS, PROJECT)

Route = Tuple[str, Optional[str]]


def parse_route(params: Mapping[str, str]) -> Route:
    """Turn ``?page=project&id=3`` style params into ``(page, project_id)``."""
    page = (params.get("page") or HOME).strip().lower()
    if page not in PAGES:
        page = HOME
    project_id = params.get("id")
    if page != PROJECT:
        project_id = None
    return page, project_id


def current_route() -> Route:
    return parse_route(st.query_params)


def go_to(page: str, project_id: Optional[object] = None) -> None:
    """Navigate by rewriting the query params and rerunning the script."""
    st.query_params.clear()
    if page != HOME:
        st.query_params["page"] = page
    if project_id is not None:
        st.query_params["id"] = str(project_id)
    st.rerun()
