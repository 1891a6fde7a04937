# roster_core/config.py
from __future__ import annotations
import logging
import os
import textwrap

import yaml

from .models import AppConfig

# ===== App defaults =====
DEFAULT_CONFIG = {
    "page_title": "Team Management System",
    "random_seed": None,     # None -> fresh entropy on every app start
    "grid_columns": 3,
    "log_level": "INFO",
}

DEFAULT_SETTINGS_YAML = textwrap.dedent("""\
# Team Management System settings
page_title: Team Management System
# integer for a reproducible shuffle, null for a fresh one each session
random_seed: null
grid_columns: 3
log_level: INFO
""")

SETTINGS_PATH = os.path.join("assets", "settings.yaml")


def ensure_assets_exist(path: str = SETTINGS_PATH):
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    if not os.path.exists(path):
        with open(path, "w", encoding="utf-8") as f:
            f.write(DEFAULT_SETTINGS_YAML)


def load_settings(path: str = SETTINGS_PATH) -> AppConfig:
    if not os.path.exists(path):
        return AppConfig(**DEFAULT_CONFIG)
    with open(path, "r", encoding="utf-8") as f:
        obj = yaml.safe_load(f) or {}
    if not isinstance(obj, dict):
        raise ValueError(f"{path} must contain a mapping of settings.")
    merged = dict(DEFAULT_CONFIG)
    merged.update(obj)
    return AppConfig(**merged)


def save_settings(path: str, text: str):
    obj = yaml.safe_load(text) or {}
    if not isinstance(obj, dict):
        raise ValueError("Settings must be a mapping.")
    AppConfig(**{**DEFAULT_CONFIG, **obj})  # validate before writing
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure root logging once; Streamlit reruns the script so repeat calls only adjust the level."""
    root = logging.getLogger()
    if not any(getattr(h, "_roster_handler", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        handler._roster_handler = True
        root.addHandler(handler)
    logger = logging.getLogger("roster_core")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return logger


# ===== Visual theme (wrapped in <style>) =====
def ui_css() -> str:
    return """
<style>
:root{
  --surface: rgba(255,255,255,.9);
  --line:#e0e4f0;
  --text:#1e1b4b;
  --sub:#6b7280;
  --accent:#4f46e5;
  --accent-soft:#e0e7ff;
  --radius:14px;
  --shadow:0 10px 30px rgba(49,46,129,.12);
}
html, body, .stApp {
  background: linear-gradient(135deg,#eff6ff,#eef2ff 50%,#faf5ff) !important;
}
.block-container { padding-top: 1.5rem; max-width: 1200px; }

.team-head{
  display:flex;justify-content:space-between;align-items:center;
  margin-bottom:6px;
}
.team-chip{
  background:var(--accent-soft);color:var(--accent);font-weight:700;
  border-radius:999px;padding:4px 14px;font-size:1.1rem;
}
.team-chip.active{ background:var(--accent); color:#fff; }
.roll{
  color:var(--accent);background:var(--accent-soft);font-weight:600;
  border-radius:6px;padding:2px 8px;font-size:.85rem;white-space:nowrap;
}
.small{color:var(--sub);font-size:12px}

.stButton > button, .stDownloadButton > button { border-radius:10px; }
.stButton > button[kind="primary"] { background: var(--accent); border-color: var(--accent); }
</style>
"""
