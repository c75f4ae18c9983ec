"""Per-session objects kept in ``st.session_state``."""

import streamlit as st

from taskflow_core.catalog import ProjectCatalog
from taskflow_core.config import CatalogConfig
from taskflow_core.page_state import ProjectsPageState
from taskflow_core.seed_data import SEED_PROJECTS

from .error_handler import ErrorHandler


def get_catalog() -> ProjectCatalog:
    if "catalog" not in st.session_state:
        st.session_state.catalog = ProjectCatalog(SEED_PROJECTS)
    return st.session_state.catalog


def get_projects_page_state(config: CatalogConfig) -> ProjectsPageState:
    if "projects_page" not in st.session_state:
        st.session_state.projects_page = ProjectsPageState(
            debounce_seconds=config.filter_debounce_seconds
        )
    return st.session_state.projects_page


def get_error_handler() -> ErrorHandler:
    """One handler per session so failure counts survive reruns."""
    if "error_handler" not in st.session_state:
        st.session_state.error_handler = ErrorHandler()
    return st.session_state.error_handler
