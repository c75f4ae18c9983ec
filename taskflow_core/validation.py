import logging
from typing import Tuple

from .models import ProjectDraft, ProjectId, ProjectItem

TITLE_REQUIRED = "Title is required"


class ProjectValidationError(ValueError):
    """Raised when a project draft cannot be added to the catalog."""


class ProjectFormValidator:
    """Validate and normalise add-project form input"""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def validate(self, draft: ProjectDraft) -> Tuple[bool, str]:
        """Only the title is required."""
        if not (draft.title or "").strip():
            self.logger.debug("Rejected project draft without a title")
            return False, TITLE_REQUIRED
        return True, "Valid project"

    def clean(self, draft: ProjectDraft) -> ProjectDraft:
        """Trim surrounding whitespace from every field"""
        return ProjectDraft(
            title=(draft.title or "").strip(),
            description=(draft.description or "").strip(),
            image=(draft.image or "").strip(),
            meta=(draft.meta or "").strip(),
        )

    def to_item(self, draft: ProjectDraft, project_id: ProjectId) -> ProjectItem:
        """Build a project from a draft; blank optional fields become None."""
        cleaned = self.clean(draft)
        return ProjectItem(
            id=project_id,
            title=cleaned.title,
            description=cleaned.description or None,
            image=cleaned.image or None,
            meta=cleaned.meta or None,
        )
