"""Projects list page: filter, add and grid/table views."""

from __future__ import annotations

import logging
import time

import streamlit as st

from taskflow_core.catalog import ProjectCatalog
from taskflow_core.config import CatalogConfig
from taskflow_core.display_utils import escape_markdown
from taskflow_core.export import export_filename, projects_to_csv
from taskflow_core.page_state import VIEW_MODES, ProjectsPageState

from .add_project_dialog import dialog_action_triggered, render_add_project_dialog, reset_form_widgets
from .project_grid import render_project_grid, render_project_table

logger = logging.getLogger(__name__)

FILTER_INPUT_KEY = "projects_filter_input"
FILTER_HINT = "Try parts of title or characters in order."


def _on_filter_change(state: ProjectsPageState) -> None:
    state.set_filter_input(st.session_state.get(FILTER_INPUT_KEY, ""), time.monotonic())


def _on_filter_clear(state: ProjectsPageState) -> None:
    state.clear_filter()
    st.session_state[FILTER_INPUT_KEY] = ""


def _settle_filter(state: ProjectsPageState) -> None:
    if state.settle_filter(time.monotonic()):
        st.rerun()


def _render_filter_panel(state: ProjectsPageState) -> None:
    if FILTER_INPUT_KEY not in st.session_state:
        st.session_state[FILTER_INPUT_KEY] = state.filter_input

    input_col, clear_col = st.columns([6, 1])
    with input_col:
        st.text_input(
            "Search projects",
            key=FILTER_INPUT_KEY,
            placeholder="Search projects...",
            label_visibility="collapsed",
            on_change=_on_filter_change,
            args=(state,),
        )
    with clear_col:
        if state.filter_input:
            st.button("✕", key="projects_filter_clear", help="Clear filter", on_click=_on_filter_clear, args=(state,))
    st.caption(FILTER_HINT)


def render_projects_page(catalog: ProjectCatalog, state: ProjectsPageState, config: CatalogConfig) -> None:
    title_col, new_col, filter_col = st.columns([6, 1, 1])
    with title_col:
        st.header("Projects")
    with new_col:
        open_add = st.button("New", key="projects_new", type="primary")
    with filter_col:
        if st.button("Filter", key="projects_filter_toggle"):
            state.toggle_filter()

    if state.sync_add_dialog(opened=open_add, interacted=dialog_action_triggered()):
        if open_add:
            logger.debug("Opening add-project dialog")
            reset_form_widgets()
        render_add_project_dialog(catalog, state, config.static_dir)

    if state.show_filter:
        _render_filter_panel(state)

    state.settle_filter(time.monotonic())
    if state.debouncer.pending:
        st.fragment(_settle_filter, run_every=max(config.filter_debounce_seconds, 0.05))(state)

    visible = state.visible_projects(catalog)

    info_col, view_col = st.columns([3, 2])
    with info_col:
        if state.active_filter.strip():
            st.caption(f"Showing {len(visible)} of {len(catalog)} projects matching “{escape_markdown(state.active_filter.strip())}”")
        else:
            st.caption(f"{len(catalog)} projects")
    with view_col:
        state.view_mode = st.radio(
            "View",
            VIEW_MODES,
            index=VIEW_MODES.index(state.view_mode),
            key="projects_view_mode",
            horizontal=True,
            label_visibility="collapsed",
        )

    if state.view_mode == "Table":
        render_project_table(visible)
    else:
        render_project_grid(visible, columns=config.grid_columns, static_dir=config.static_dir)

    if visible:
        st.download_button(
            label="📥 Download CSV",
            data=projects_to_csv(visible),
            file_name=export_filename(state.active_filter),
            mime="text/csv",
            key="projects_download_csv",
        )
