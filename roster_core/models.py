# roster_core/models.py
from __future__ import annotations
from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Member(BaseModel):
    model_config = ConfigDict(frozen=True)

    identifier: int
    name: str = ""


class Team(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    members: Tuple[Member, ...] = ()

    def identifiers(self) -> Tuple[int, ...]:
        return tuple(m.identifier for m in self.members)


class RosterState(BaseModel):
    """Immutable snapshot owned by RosterManager; replaced wholesale per operation."""
    model_config = ConfigDict(frozen=True)

    teams: Tuple[Team, ...] = ()
    search_term: str = ""
    selected_team: Optional[int] = None
    generation: int = 0  # bumped by every generate(); UI uses it to reset widget keys

    def team(self, team_id: int) -> Optional[Team]:
        for t in self.teams:
            if t.id == team_id:
                return t
        return None


class AppConfig(BaseModel):
    page_title: str = "Team Management System"
    random_seed: Optional[int] = None
    grid_columns: int = 3
    log_level: str = "INFO"

    @field_validator("random_seed")
    @classmethod
    def _seed_non_negative(cls, v):
        if v is not None and v < 0:
            raise ValueError("random_seed must be null or a non-negative integer")
        return v

    @field_validator("grid_columns")
    @classmethod
    def _columns_range(cls, v):
        if not 1 <= v <= 4:
            raise ValueError("grid_columns must be between 1 and 4")
        return v

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v):
        level = str(v).upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log_level: {v}")
        return level
