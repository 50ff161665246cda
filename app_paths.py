"""
app_paths.py — central paths for local data and analytics.

This app keeps only two kinds of local files:
- the offline collection sample (used when the online API is not wanted)
- analytics events (local only, no external tracking)

Selections are never written to disk; they live in the Streamlit session.
"""

from __future__ import annotations

from pathlib import Path

# Project root (folder where this file lives)
ROOT_DIR = Path(__file__).resolve().parent

# App folders
DATA_DIR = ROOT_DIR / "data"
ANALYTICS_DIR = DATA_DIR / "analytics"

# Ensure directories exist (safe no-op if already created)
DATA_DIR.mkdir(parents=True, exist_ok=True)
ANALYTICS_DIR.mkdir(parents=True, exist_ok=True)

# Offline collection (list of artwork dicts)
COLLECTION_SAMPLE_FILE = DATA_DIR / "collection_sample.json"

# Analytics files
ANALYTICS_LOG_FILE = ANALYTICS_DIR / "events.jsonl"
ANALYTICS_CONFIG_FILE = DATA_DIR / "analytics_config.json"
