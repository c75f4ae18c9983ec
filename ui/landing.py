import streamlit as st

from taskflow_core.catalog import ProjectCatalog

from .routing import PROJECT, PROJECTS, go_to


def render_landing_page(catalog: ProjectCatalog) -> None:
    st.header("Welcome")
    st.markdown("Browse the project catalog or jump straight to a project.")

    col1, col2 = st.columns(2)
    with col1:
        if st.button("📁 Projects", key="landing_projects", type="primary"):
            go_to(PROJECTS)
    with col2:
        items = catalog.items
        if st.button("📄 Individual project", key="landing_project", disabled=not items):
            go_to(PROJECT, items[0].id)
