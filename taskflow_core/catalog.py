"""In-memory working set of projects for one browser session."""

from __future__ import annotations

import logging
import time
from typing import Callable, Iterable, Iterator, List, Optional

from .core_utils import log_action
from .models import ProjectDraft, ProjectId, ProjectItem
from .text_filter import filter_projects
from .validation import ProjectFormValidator, ProjectValidationError

logger = logging.getLogger(__name__)


def _epoch_millis() -> int:
    return int(time.time() * 1000)


class ProjectCatalog:
    """
    Ordered list of projects, newest first.

    The catalog starts from a copy of the seed data; projects are only ever
    prepended, never edited or removed.
    """

    def __init__(
        self,
        seed: Iterable[ProjectItem] = (),
        clock: Callable[[], int] = _epoch_millis,
        validator: Optional[ProjectFormValidator] = None,
    ):
        self._items: List[ProjectItem] = list(seed)
        self._clock = clock
        self._validator = validator or ProjectFormValidator()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ProjectItem]:
        return iter(list(self._items))

    @property
    def items(self) -> List[ProjectItem]:
        return list(self._items)

    def _new_id(self) -> str:
        stamp = self._clock()
        taken = {str(item.id) for item in self._items}
        while f"p-{stamp}" in taken:
            stamp += 1
        return f"p-{stamp}"

    def add(self, draft: ProjectDraft) -> ProjectItem:
        """Validate ``draft`` and prepend it as a new project."""
        ok, message = self._validator.validate(draft)
        if not ok:
            raise ProjectValidationError(message)

        item = self._validator.to_item(draft, self._new_id())
        self._items.insert(0, item)
        log_action("project_added", {"id": item.id, "title": item.title})
        return item

    def get(self, project_id: ProjectId) -> Optional[ProjectItem]:
        """Find a project by id; ids compare by their string form."""
        wanted = str(project_id)
        return next((item for item in self._items if str(item.id) == wanted), None)

    def filtered(self, query: str) -> List[ProjectItem]:
        results = filter_projects(self._items, query)
        if query and query.strip():
            logger.debug("Filter %r matched %d of %d projects", query, len(results), len(self._items))
        return results
