import streamlit as st

from taskflow_core.config import CatalogConfig

from .routing import HOME, PROJECTS, go_to


def render_navbar(config: CatalogConfig, project_count: int) -> None:
    """Sidebar brand and main navigation."""
    with st.sidebar:
        st.markdown(f"## 🟣 {config.brand_name}")
        if st.button("🏠 Home", key="nav_home", use_container_width=True):
            go_to(HOME)
        if st.button("📁 Projects", key="nav_projects", use_container_width=True):
            go_to(PROJECTS)
        st.markdown("---")
        st.caption(f"{project_count} projects in this session")
