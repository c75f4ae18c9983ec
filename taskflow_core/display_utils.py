"""Display-only helpers shared by the grid and detail views."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from .models import ProjectItem

MISSING_META = "—"


def is_local_image(ref: Optional[str]) -> bool:
    """Absolute paths ("/images/x.png") are served from the static directory."""
    if not ref:
        return False
    return ref.startswith("/")


def classify_image(ref: Optional[str]) -> Optional[str]:
    """
    Classify an image reference for rendering.

    Returns ``None`` for no image, ``"local"`` for a static path, ``"remote"``
    for an http(s) URL and ``"invalid"`` for anything else.
    """
    if not ref or not ref.strip():
        return None
    ref = ref.strip()
    if is_local_image(ref):
        return "local"
    if ref.lower().startswith(("http://", "https://")):
        return "remote"
    return "invalid"


def resolve_local_image(ref: str, static_dir: Union[str, Path]) -> Optional[Path]:
    """Map "/x.png" to ``static_dir/x.png`` if the file exists inside it."""
    if not is_local_image(ref):
        return None
    root = Path(static_dir).resolve()
    candidate = (root / ref.lstrip("/")).resolve()
    if root not in candidate.parents or not candidate.is_file():
        return None
    return candidate


def format_meta(meta: Optional[str]) -> str:
    if not meta:
        return MISSING_META
    return meta


def describe(item: ProjectItem, placeholder: str = "No description provided.") -> str:
    return item.description or placeholder


_MARKDOWN_SPECIALS = set("\\`*_[]()<>#|~!$:{}")


def escape_markdown(text: Optional[str]) -> str:
    """Backslash-escape characters Streamlit markdown would interpret."""
    if not text:
        return ""
    return "".join(f"\\{ch}" if ch in _MARKDOWN_SPECIALS else ch for ch in text)
