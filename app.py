# app.py - TaskFlow project catalog
import logging

import streamlit as st

from taskflow_core.config import load_config
from taskflow_core.core_utils import setup_logging
from ui import (
    current_route,
    get_catalog,
    get_error_handler,
    get_projects_page_state,
    is_script_control,
    render_landing_page,
    render_navbar,
    render_project_detail,
    render_projects_page,
)
from ui.routing import PROJECT, PROJECTS

CONFIG = load_config()
setup_logging(CONFIG.log_level)
logger = logging.getLogger(__name__)

error_handler = get_error_handler()


@error_handler.with_error_handling("projects page", show_details=True)
def render_projects_tab(catalog):
    render_projects_page(catalog, get_projects_page_state(CONFIG), CONFIG)


@error_handler.with_error_handling("project detail", show_details=True)
def render_detail_tab(catalog, project_id):
    render_project_detail(catalog, project_id, CONFIG)


def main():
    """Route to the requested page"""
    try:
        st.set_page_config(
            page_title=CONFIG.page_title,
            layout="wide",
            initial_sidebar_state="expanded",
        )

        catalog = get_catalog()
        render_navbar(CONFIG, len(catalog))

        page, project_id = current_route()
        if page == PROJECTS:
            render_projects_tab(catalog)
        elif page == PROJECT:
            render_detail_tab(catalog, project_id)
        else:
            st.title(f"🟣 {CONFIG.brand_name}")
            render_landing_page(catalog)

    except Exception as e:
        if is_script_control(e):
            raise
        logger.error("Main application error: %s", e, exc_info=True)
        st.error(f"⚠️ Application Error: {e}")
        render_error_recovery()


def render_error_recovery():
    """Reset the session or show what state it is in"""
    st.markdown("---")
    st.markdown("### 🛠️ Error Recovery")

    col1, col2 = st.columns(2)

    with col1:
        if st.button("🔄 Reset session", key="recovery_reset"):
            for key in list(st.session_state.keys()):
                del st.session_state[key]
            st.success("Session reset: the catalog is back to the sample projects.")

    with col2:
        if st.button("📋 Show debug info", key="recovery_debug"):
            page, project_id = current_route()
            st.code(f"""
Streamlit Version: {st.__version__}
Route: {page} {project_id or ''}
Projects: {len(st.session_state.get('catalog', []))}
Failed renders: {error_handler.summary() or 'none'}
            """)


if __name__ == "__main__":
    main()
