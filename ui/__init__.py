"""
Streamlit UI package for the TaskFlow project catalog.
"""

from .error_handler import ErrorHandler, is_script_control
from .landing import render_landing_page
from .navbar import render_navbar
from .project_detail import render_project_detail
from .projects_page import render_projects_page
from .routing import current_route, go_to, parse_route
from .session import get_catalog, get_error_handler, get_projects_page_state

__all__ = [
    "ErrorHandler",
    "is_script_control",
    "render_landing_page",
    "render_navbar",
    "render_project_detail",
    "render_projects_page",
    "current_route",
    "go_to",
    "parse_route",
    "get_catalog",
    "get_error_handler",
    "get_projects_page_state",
]
