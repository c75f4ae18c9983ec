"""Fuzzy text filter used by the projects list."""

from __future__ import annotations

from typing import Iterable, List

from .models import ProjectItem


def is_subsequence(token: str, text: str) -> bool:
    """Return True if the characters of ``token`` appear in ``text`` in order."""
    i = 0
    for ch in text:
        if i == len(token):
            break
        if ch == token[i]:
            i += 1
    return i == len(token)


def fuzzy_match(haystack: str, query: str) -> bool:
    """
    Case-insensitive fuzzy match of ``query`` against ``haystack``.

    - An empty (or whitespace-only) query matches everything.
    - The whole query as a substring is a match.
    - Otherwise every whitespace-separated token must match, either as a
      substring or as an ordered subsequence of the haystack.

    Each token is scanned from the start of the haystack on its own, so
    ``fuzzy_match("Alpha Beta", "beta alpha")`` is True.
    """
    text = (haystack or "").lower()
    q = (query or "").lower().strip()
    if not q:
        return True
    if q in text:
        return True

    return all(token in text or is_subsequence(token, text) for token in q.split())


def build_haystack(item: ProjectItem) -> str:
    """Searchable text of a project: title, description and meta."""
    return f"{item.title or ''} {item.description or ''} {item.meta or ''}"


def filter_projects(items: Iterable[ProjectItem], query: str) -> List[ProjectItem]:
    """Projects whose searchable text matches ``query``, order preserved."""
    q = (query or "").strip()
    if not q:
        return list(items)
    return [item for item in items if fuzzy_match(build_haystack(item), q)]


__all__ = ["fuzzy_match", "is_subsequence", "build_haystack", "filter_projects"]
