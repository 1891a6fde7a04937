# roster_core/io.py
from __future__ import annotations
import io
import logging
from typing import Dict, List

import pandas as pd

from .aliases import map_headers
from .constants import CSV_HEADERS
from .manager import RosterManager
from .models import RosterState

logger = logging.getLogger(__name__)

REQUIRED_NAME_COLUMNS = ["roll_number", "name"]


def roster_to_dataframe(state: RosterState) -> pd.DataFrame:
    rows = [
        {"team_id": t.id, "roll_number": m.identifier, "name": m.name}
        for t in state.teams
        for m in t.members
    ]
    return pd.DataFrame(rows, columns=CSV_HEADERS)


def save_roster_csv_bytes(state: RosterState) -> bytes:
    buf = io.StringIO()
    roster_to_dataframe(state).to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")


def generate_names_template_csv_bytes(state: RosterState) -> bytes:
    """Roll numbers in ascending order with the names currently assigned."""
    df = roster_to_dataframe(state)[["roll_number", "name"]].sort_values("roll_number")
    buf = io.StringIO()
    df.to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")


def load_names_csv(file_like) -> Dict[int, str]:
    df = pd.read_csv(file_like, dtype=str, keep_default_na=False)
    df, _ = map_headers(df)
    missing = [c for c in REQUIRED_NAME_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")

    rolls = pd.to_numeric(df["roll_number"].str.strip(), errors="coerce")
    bad = df.index[rolls.isna() | (rolls % 1 != 0)].tolist()
    if bad:
        # header is line 1
        raise ValueError(f"Invalid roll numbers on lines: {[i + 2 for i in bad]}")

    # later rows win for repeated roll numbers
    return {int(r): str(n) for r, n in zip(rolls, df["name"])}


def apply_names(manager: RosterManager, names: Dict[int, str]) -> List[int]:
    """Rename members by roll number. Returns roll numbers not present in the roster."""
    team_of = {m.identifier: t.id for t in manager.state.teams for m in t.members}
    unknown: List[int] = []
    for roll, name in names.items():
        team_id = team_of.get(roll)
        if team_id is None:
            unknown.append(roll)
            continue
        manager.rename_member(team_id, roll, name)
    if unknown:
        logger.info("Skipped %d unknown roll numbers: %s", len(unknown), sorted(unknown))
    return sorted(unknown)
