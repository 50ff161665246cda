# analytics.py
"""
Local analytics for the Art Institute Explorer.

This module provides a very simple, fully local analytics system that:
- stores events as JSON lines in `data/analytics/events.jsonl`,
- uses Streamlit's session_state to keep a per-session `session_id`,
- optionally enriches events with installation metadata
  (city, country, timezone) from `data/analytics_config.json`,
- exposes two main functions:

    track_event(event, page, props=None)
    track_event_once(event, page, once_key, props=None)

No data is sent to any external server.
"""

from __future__ import annotations

import json
import time
import uuid
from typing import Any, Dict, Optional

import streamlit as st

import app_paths


# ============================================================
# Session identifier helpers
# ============================================================
def _get_session_id() -> str:
    """
    Return a stable session_id for the current Streamlit session.

    A random UUID is generated the first time and stored in
    st.session_state, so all events from the same browser session
    can be grouped together later.
    """
    key = "_analytics_session_id"
    sid = st.session_state.get(key)
    if not sid:
        sid = str(uuid.uuid4())
        st.session_state[key] = sid
    return sid


# ============================================================
# Installation metadata (optional, local only)
# ============================================================
def _load_installation_metadata() -> Dict[str, Any]:
    """
    Read installation metadata from ANALYTICS_CONFIG_FILE.

    Example expected keys (all optional):
        - installation_city
        - installation_country
        - installation_timezone

    The result is cached in session_state and attached to every event
    as props: "install_city", "install_country", "install_timezone".
    """
    cache_key = "_analytics_installation_meta"
    if cache_key in st.session_state:
        return st.session_state[cache_key]

    meta: Dict[str, Any] = {}
    try:
        config_file = app_paths.ANALYTICS_CONFIG_FILE
        if config_file.exists():
            with config_file.open("r", encoding="utf-8") as f:
                data = json.load(f)
            if isinstance(data, dict):
                meta = {
                    "install_city": data.get("installation_city"),
                    "install_country": data.get("installation_country"),
                    "install_timezone": data.get("installation_timezone"),
                }
    except (OSError, ValueError):
        # Analytics should never break the app
        meta = {}

    st.session_state[cache_key] = meta
    return meta


# ============================================================
# Low-level writer (append JSON lines to file)
# ============================================================
def _write_event(record: Dict[str, Any]) -> None:
    """
    Append a single analytics event as a JSON line.

    Failures (permissions, disk full, etc.) are ignored.
    """
    try:
        log_file = app_paths.ANALYTICS_LOG_FILE
        log_file.parent.mkdir(parents=True, exist_ok=True)
        with log_file.open("a", encoding="utf-8") as f:
            f.write(json.dumps(record, ensure_ascii=False) + "\n")
    except OSError:
        pass


# ============================================================
# Public API: track_event and track_event_once
# ============================================================
def track_event(
    event: str,
    page: str,
    props: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Log a generic analytics event.

    Parameters
    ----------
    event:
        Short string identifying the type of event
        (e.g. "page_loaded", "target_set", "selection_change").
    page:
        Logical page name where the event occurred
        (e.g. "Explorer", "My_Selection").
    props:
        Optional dictionary with extra properties for the event.
        These are merged with installation metadata.
    """
    base_props = props.copy() if isinstance(props, dict) else {}
    base_props.update(_load_installation_metadata())

    record = {
        "ts": time.time(),
        "event": event,
        "page": page,
        "session_id": _get_session_id(),
        "props": base_props,
    }
    _write_event(record)


def track_event_once(
    event: str,
    page: str,
    once_key: str,
    props: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Log an event only once per Streamlit session, based on `once_key`.

    Useful for page views, which would otherwise be logged on every rerun.
    """
    state_key = f"_analytics_once::{once_key}"
    if st.session_state.get(state_key):
        return

    st.session_state[state_key] = True
    track_event(event=event, page=page, props=props)
