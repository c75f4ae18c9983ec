"""
Core logic package for the TaskFlow project catalog.

Everything here is plain Python; the Streamlit views live in ``ui``.
"""

from .catalog import ProjectCatalog
from .config import CatalogConfig, load_config
from .models import ProjectDraft, ProjectItem
from .page_state import FilterDebouncer, ProjectsPageState
from .seed_data import SEED_PROJECTS
from .text_filter import build_haystack, filter_projects, fuzzy_match
from .validation import ProjectFormValidator, ProjectValidationError

__version__ = "0.1.0"

__all__ = [
    "ProjectCatalog",
    "CatalogConfig",
    "load_config",
    "ProjectDraft",
    "ProjectItem",
    "FilterDebouncer",
    "ProjectsPageState",
    "SEED_PROJECTS",
    "build_haystack",
    "filter_projects",
    "fuzzy_match",
    "ProjectFormValidator",
    "ProjectValidationError",
]
