"""
Standardized feedback utilities for error, empty, and loading states.

Provides reusable components for displaying errors, the initial empty state and
loading indicators in a consistent manner.
"""

from contextlib import contextmanager
from typing import Optional

import streamlit as st

from cocktails.messages import failure_message
from cocktails.models import FailureReason


def show_error(message: str, hint: Optional[str] = None) -> None:
    """
    Display a standardized error message with optional hint.

    Args:
        message: Main error message to display
        hint: Optional hint text to help users resolve the issue
    """
    st.error(f"⚠️ {message}")
    if hint:
        st.caption(f"💡 {hint}")


def show_failure(reason: FailureReason) -> None:
    """
    Display the message for a failure reason.

    Input problems and empty results are shown as warnings; everything else as an error.
    """
    message = failure_message(reason)
    if reason in (FailureReason.EMPTY_QUERY, FailureReason.NO_RESULTS_FOUND):
        st.warning(message)
    else:
        show_error(message, hint="Try again in a moment.")


def show_empty_state(title: str, subtitle: Optional[str] = None) -> None:
    """
    Display a standardized empty state.

    Args:
        title: Main empty state title
        subtitle: Optional subtitle/description text
    """
    st.info(f"🍸 **{title}**")
    if subtitle:
        st.caption(subtitle)


@contextmanager
def working_spinner(label: str = "Working…"):
    """
    Context manager wrapper for standardized loading spinners.

    Usage:
        with working_spinner("Loading cocktails..."):
            session.search(resolver, query)
    """
    with st.spinner(label):
        yield
