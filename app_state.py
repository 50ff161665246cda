"""Session-scoped objects shared by the Streamlit pages."""

from __future__ import annotations

import streamlit as st

from page_view import PageViewController
from selection_ledger import SelectionLedger

CONTROLLER_KEY = "page_view"


def get_controller() -> PageViewController:
    """Return this session's page view (created with an empty ledger on first use)."""
    if CONTROLLER_KEY not in st.session_state:
        st.session_state[CONTROLLER_KEY] = PageViewController(SelectionLedger())
    return st.session_state[CONTROLLER_KEY]
