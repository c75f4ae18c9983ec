"""The "Add project" dialog on the projects page."""

from __future__ import annotations

import streamlit as st

from taskflow_core.catalog import ProjectCatalog
from taskflow_core.models import ProjectDraft
from taskflow_core.page_state import ProjectsPageState

from .images import render_project_image

FORM_KEYS = ("add_title", "add_description", "add_image", "add_meta")
ACTION_KEYS = ("add_submit", "add_cancel")


def reset_form_widgets() -> None:
    for key in FORM_KEYS:
        st.session_state.pop(key, None)


def dialog_action_triggered() -> bool:
    """True when Cancel or Add Project triggered the current run."""
    return any(st.session_state.get(key) for key in ACTION_KEYS)


@st.dialog("Add project")
def render_add_project_dialog(catalog: ProjectCatalog, state: ProjectsPageState, static_dir: str) -> None:
    st.caption("Fill in a title (required) and optional details.")

    title = st.text_input("Title *", key="add_title", placeholder="Project title")
    description = st.text_area("Description", key="add_description", placeholder="Short description", height=90)
    image = st.text_input("Image URL", key="add_image", placeholder="https://...")
    if image.strip():
        with st.container(border=True):
            if not render_project_image(image, static_dir):
                st.caption("Preview unavailable")
    meta = st.text_input("Meta", key="add_meta", placeholder="e.g. React, Next.js")

    error_slot = st.empty()
    if state.form_error:
        error_slot.error(state.form_error)

    _, cancel_col, add_col = st.columns([2, 1, 1])
    with cancel_col:
        if st.button("Cancel", key="add_cancel"):
            state.cancel_add()
            st.rerun()
    with add_col:
        if st.button("Add Project", key="add_submit", type="primary"):
            state.draft = ProjectDraft(title=title, description=description, image=image, meta=meta)
            if state.submit_add(catalog) is not None:
                reset_form_widgets()
                st.rerun()
            error_slot.error(state.form_error)
