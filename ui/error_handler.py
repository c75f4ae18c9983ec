"""Error reporting for page renderers."""

import logging
from collections import Counter
from functools import wraps
from typing import Callable, Optional

import streamlit as st


def is_script_control(error: BaseException) -> bool:
    """``st.rerun()`` and ``st.stop()`` are signalled with streamlit runtime exceptions."""
    return type(error).__module__.startswith("streamlit.runtime")


class ErrorHandler:
    """Logs, counts and shows errors raised while rendering a page"""

    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self.error_counts: Counter = Counter()

    def handle_error(self, error: Exception, context: str, show_details: bool = False) -> None:
        self.logger.error("Error in %s: %s", context, error, exc_info=True)
        self.error_counts[context] += 1

        st.error(f"❌ Could not render the {context}: {error}")
        if show_details:
            with st.expander("🔍 Error Details"):
                st.exception(error)

    def with_error_handling(self, context: str, show_details: bool = False):
        """Decorator: report errors from ``func`` instead of crashing the page"""

        def decorator(func: Callable):
            @wraps(func)
            def wrapper(*args, **kwargs):
                try:
                    return func(*args, **kwargs)
                except Exception as e:
                    if is_script_control(e):
                        raise
                    self.handle_error(e, context, show_details=show_details)
                    return None

            return wrapper

        return decorator

    def summary(self) -> Optional[str]:
        """e.g. ``"projects page x2, project detail x1"``; None when nothing failed."""
        if not self.error_counts:
            return None
        return ", ".join(f"{context} x{count}" for context, count in self.error_counts.most_common())
