"""
Ephemeral state of the projects page.

Kept free of Streamlit so the filter and add-form flows can be tested
directly; the UI stores one ``ProjectsPageState`` per session.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .catalog import ProjectCatalog
from .core_utils import log_action
from .models import ProjectDraft, ProjectItem
from .validation import ProjectValidationError

logger = logging.getLogger(__name__)

VIEW_MODES = ("Grid", "Table")


class FilterDebouncer:
    """
    Holds back a changing value until it has been stable for ``delay_seconds``.

    Times are caller-supplied (e.g. ``time.monotonic()``).
    """

    def __init__(self, delay_seconds: float = 0.25):
        self.delay_seconds = max(0.0, delay_seconds)
        self.value = ""
        self._pending: Optional[str] = None
        self._submitted_at = 0.0

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def submit(self, value: str, now: float) -> bool:
        """Record ``value``; True only if a zero delay settled it to a new value."""
        self._pending = value
        self._submitted_at = now
        if self.delay_seconds == 0:
            return self.settle(now)
        return False

    def settle(self, now: float) -> bool:
        """Promote the pending value once the delay has passed; True if it changed."""
        if self._pending is None or now - self._submitted_at < self.delay_seconds:
            return False
        changed = self._pending != self.value
        self.value = self._pending
        self._pending = None
        return changed

    def reset(self) -> None:
        self.value = ""
        self._pending = None


@dataclass
class ProjectsPageState:
    debounce_seconds: float = 0.25
    show_filter: bool = False
    filter_input: str = ""
    view_mode: str = "Grid"
    is_add_open: bool = False
    draft: ProjectDraft = field(default_factory=ProjectDraft)
    form_error: Optional[str] = None

    def __post_init__(self):
        self.debouncer = FilterDebouncer(self.debounce_seconds)

    @property
    def active_filter(self) -> str:
        return self.debouncer.value

    def toggle_filter(self) -> bool:
        self.show_filter = not self.show_filter
        return self.show_filter

    def _filter_settled(self, changed: bool) -> bool:
        if changed and self.active_filter.strip():
            log_action("filter_applied", {"query": self.active_filter})
        return changed

    def set_filter_input(self, value: str, now: float) -> bool:
        self.filter_input = value
        return self._filter_settled(self.debouncer.submit(value, now))

    def settle_filter(self, now: float) -> bool:
        return self._filter_settled(self.debouncer.settle(now))

    def clear_filter(self) -> None:
        self.filter_input = ""
        self.debouncer.reset()

    def visible_projects(self, catalog: ProjectCatalog) -> List[ProjectItem]:
        return catalog.filtered(self.active_filter)

    def open_add(self) -> None:
        self.draft = ProjectDraft()
        self.form_error = None
        self.is_add_open = True

    def cancel_add(self) -> None:
        self.is_add_open = False

    def sync_add_dialog(self, opened: bool, interacted: bool) -> bool:
        """
        Decide whether the add dialog renders on this run.

        ``opened`` is the New click; ``interacted`` means a dialog action
        triggered the run. Any other full rerun means the dialog was
        dismissed, so the flag is cleared.
        """
        if opened:
            self.open_add()
        elif not (self.is_add_open and interacted):
            self.is_add_open = False
        return self.is_add_open

    def submit_add(self, catalog: ProjectCatalog) -> Optional[ProjectItem]:
        """Add the current draft; on failure keep the dialog open with an error."""
        try:
            item = catalog.add(self.draft)
        except ProjectValidationError as e:
            self.form_error = str(e)
            return None

        self.draft = ProjectDraft()
        self.form_error = None
        self.is_add_open = False
        return item
