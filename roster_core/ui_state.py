"""
Streamlit session glue shared by app.py and pages/.
"""
from __future__ import annotations

import streamlit as st
import yaml

from .config import DEFAULT_CONFIG, ensure_assets_exist, load_settings, setup_logging
from .file_save import DownloadQueue
from .generator import default_rng
from .manager import RosterManager, export_is_current
from .models import AppConfig, RosterState


def _note(message: str):
    log = st.session_state.setdefault("exceptions", [])
    if message not in log:
        log.append(message)


def load_app_config() -> AppConfig:
    """Settings file problems fall back to defaults and are noted for display."""
    ensure_assets_exist()
    try:
        cfg = load_settings()
    except (ValueError, yaml.YAMLError) as exc:  # pydantic ValidationError is a ValueError
        _note(f"Settings ignored: {exc}")
        cfg = AppConfig(**DEFAULT_CONFIG)
    setup_logging(cfg.log_level)
    return cfg


def ensure_state(cfg: AppConfig):
    ss = st.session_state
    ss.setdefault("rng", default_rng(cfg.random_seed))
    ss.setdefault("roster_state", RosterState().model_dump())
    ss.setdefault("downloads", DownloadQueue())
    ss.setdefault("exceptions", [])

    # first display gets a roster without a click
    if ss["roster_state"]["generation"] == 0:
        get_manager().generate()


def _store(state: RosterState):
    st.session_state["roster_state"] = state.model_dump()


def _drop_stale_downloads(state: RosterState):
    # a queued export must match the roster the user sees
    get_downloads().retain(lambda d: export_is_current(state, d))


def get_manager() -> RosterManager:
    ss = st.session_state
    mgr = RosterManager(state=RosterState(**ss["roster_state"]), rng=ss["rng"])
    mgr.subscribe(_store)
    mgr.subscribe(_drop_stale_downloads)
    return mgr


def get_downloads() -> DownloadQueue:
    return st.session_state["downloads"]


def name_widget_key(generation: int, team_id: int, identifier: int) -> str:
    # generation in the key: a regenerated roster never inherits old widget text
    return f"name_{generation}_{team_id}_{identifier}"
