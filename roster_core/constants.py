# FILE: roster_core/constants.py
from __future__ import annotations
from typing import List

# --- Pool (fixed) ---
POOL_SIZE = 58

# six teams of five, then six teams of four (54 seats for 58 roll numbers)
TEAM_SIZES: List[int] = [5] * 6 + [4] * 6
TEAM_COUNT = len(TEAM_SIZES)
SEATS = sum(TEAM_SIZES)

# --- Export text ---
UNASSIGNED_NAME = "Not assigned"
EXPORT_FILENAME = "team{team_id}_details.txt"
EXPORT_HEADER = "Team {team_id}"
EXPORT_LINE = "Roll Number: {identifier}, Name: {name}"

# --- Roster CSV ---
CSV_HEADERS = ["team_id", "roll_number", "name"]


def identifier_pool() -> List[int]:
    return list(range(1, POOL_SIZE + 1))
