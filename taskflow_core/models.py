from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Union


ProjectId = Union[str, int]


@dataclass(frozen=True)
class ProjectItem:
    """
    A single project in the catalog.

    Items are never mutated after creation; a new project is a new item.
    """

    id: ProjectId
    title: str
    description: Optional[str] = None
    image: Optional[str] = None  # local path ("/images/x.png") or external URL
    meta: Optional[str] = None  # free-text tag, e.g. "React, Next.js"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ProjectDraft:
    """
    Raw values of the add-project form, exactly as typed.
    """

    title: str = ""
    description: str = ""
    image: str = ""
    meta: str = ""
