"""Card grid and table views of a list of projects."""

from __future__ import annotations

from typing import List, Sequence

import streamlit as st

from taskflow_core.display_utils import escape_markdown
from taskflow_core.export import projects_to_dataframe
from taskflow_core.models import ProjectItem

from .images import render_project_image
from .routing import PROJECT, go_to

EMPTY_MESSAGE = "No items to display."


def chunk_rows(items: Sequence[ProjectItem], columns: int) -> List[Sequence[ProjectItem]]:
    columns = max(1, columns)
    return [items[i : i + columns] for i in range(0, len(items), columns)]


def _render_card(item: ProjectItem, static_dir: str) -> None:
    with st.container(border=True):
        if item.image:
            render_project_image(item.image, static_dir)
        st.markdown(f"**{escape_markdown(item.title)}**")
        if item.description:
            st.caption(escape_markdown(item.description))
        if item.meta:
            st.caption(f"🏷️ {escape_markdown(item.meta)}")
        if st.button("Open", key=f"open_project_{item.id}"):
            go_to(PROJECT, item.id)


def render_project_grid(items: Sequence[ProjectItem], columns: int = 4, static_dir: str = "static") -> None:
    if not items:
        st.info(EMPTY_MESSAGE)
        return

    for row in chunk_rows(items, columns):
        cols = st.columns(columns)
        for col, item in zip(cols, row):
            with col:
                _render_card(item, static_dir)


def render_project_table(items: Sequence[ProjectItem]) -> None:
    if not items:
        st.info(EMPTY_MESSAGE)
        return
    st.dataframe(projects_to_dataframe(items), hide_index=True)
