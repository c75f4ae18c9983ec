"""Tabular views of projects for the table mode and CSV download."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

import pandas as pd

from .models import ProjectItem

COLUMNS = ["ID", "Title", "Description", "Meta", "Image"]


def projects_to_dataframe(items: Iterable[ProjectItem]) -> pd.DataFrame:
    rows = [
        {
            "ID": str(item.id),
            "Title": item.title,
            "Description": item.description or "",
            "Meta": item.meta or "",
            "Image": item.image or "",
        }
        for item in items
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


def projects_to_csv(items: Iterable[ProjectItem]) -> str:
    return projects_to_dataframe(items).to_csv(index=False)


def export_filename(query: str = "", now: Optional[datetime] = None) -> str:
    """e.g. ``projects_react_20250101_120000.csv``"""
    now = now or datetime.now()
    safe_query = "".join(c for c in (query or "") if c.isalnum() or c in (" ", "-", "_")).strip()
    safe_query = safe_query.replace(" ", "_")[:20]
    stamp = now.strftime("%Y%m%d_%H%M%S")
    if safe_query:
        return f"projects_{safe_query}_{stamp}.csv"
    return f"projects_{stamp}.csv"
