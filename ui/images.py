"""Render project images from static paths or external URLs."""

from typing import Optional

import streamlit as st

from taskflow_core.display_utils import classify_image, resolve_local_image


def render_project_image(ref: Optional[str], static_dir: str, caption: Optional[str] = None) -> bool:
    """Show the image for ``ref``; returns False when nothing could be shown."""
    kind = classify_image(ref)
    if kind == "remote":
        st.image(ref.strip(), caption=caption)
        return True
    if kind == "local":
        path = resolve_local_image(ref.strip(), static_dir)
        if path is not None:
            st.image(str(path), caption=caption)
            return True
    return False
