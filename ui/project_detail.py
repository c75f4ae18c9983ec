from typing import Optional

import streamlit as st

from taskflow_core.catalog import ProjectCatalog
from taskflow_core.config import CatalogConfig
from taskflow_core.display_utils import describe, escape_markdown, format_meta

from .images import render_project_image
from .routing import PROJECTS, go_to


def _render_not_found(project_id: Optional[str]) -> None:
    st.header("Project not found")
    st.markdown("We couldn't find a project with id:")
    st.code(project_id or "", language=None)
    if st.button("Back to projects", key="detail_back_not_found", type="primary"):
        go_to(PROJECTS)


def render_project_detail(catalog: ProjectCatalog, project_id: Optional[str], config: CatalogConfig) -> None:
    """Detail page for a single project."""
    project = catalog.get(project_id) if project_id else None
    if project is None:
        _render_not_found(project_id)
        return

    head_col, actions_col = st.columns([4, 1])
    with head_col:
        st.title(escape_markdown(project.title))
        summary = escape_markdown(describe(project))
        st.markdown(summary if project.description else f"*{summary}*")
    with actions_col:
        if st.button("← Back", key="detail_back"):
            go_to(PROJECTS)
        st.caption("ID")
        st.code(str(project.id), language=None)

    with st.container(border=True):
        if not render_project_image(project.image, config.static_dir, caption=project.title):
            st.caption("No image provided")

    details_col, meta_col = st.columns([2, 1])
    with details_col:
        st.subheader("Details")
        if project.description:
            st.markdown(escape_markdown(project.description))
        else:
            st.markdown("*No additional details.*")
    with meta_col:
        with st.container(border=True):
            st.markdown("**Meta**")
            st.markdown(escape_markdown(format_meta(project.meta)))
