# roster_core/manager.py
from __future__ import annotations
import logging
from typing import Callable, List, Optional, Tuple

from .constants import EXPORT_FILENAME, EXPORT_HEADER, EXPORT_LINE, UNASSIGNED_NAME
from .file_save import FileSaver, PendingDownload
from .generator import RandomSource, default_rng, generate_teams
from .models import RosterState, Team

logger = logging.getLogger(__name__)

Listener = Callable[[RosterState], None]


# -----------------------
# Pure state transitions
# -----------------------
def rename_member(state: RosterState, team_id: int, identifier: int, new_name: str) -> RosterState:
    """Return a state with exactly one member renamed; unknown ids give back ``state`` itself."""
    team = state.team(team_id)
    if team is None or identifier not in team.identifiers():
        logger.debug("rename ignored: team=%s roll=%s not in roster", team_id, identifier)
        return state

    members = tuple(
        m.model_copy(update={"name": new_name}) if m.identifier == identifier else m
        for m in team.members
    )
    new_team = team.model_copy(update={"members": members})
    teams = tuple(new_team if t.id == team_id else t for t in state.teams)
    return state.model_copy(update={"teams": teams})


def team_matches(team: Team, search_term: str) -> bool:
    needle = search_term.lower()
    return any(
        search_term in str(m.identifier) or needle in m.name.lower()
        for m in team.members
    )


def filter_teams(teams: Tuple[Team, ...], search_term: str) -> List[Team]:
    # whole teams only; member lists are never trimmed
    return [t for t in teams if team_matches(t, search_term)]


def format_team_text(team: Team) -> str:
    lines = [
        EXPORT_LINE.format(identifier=m.identifier, name=m.name or UNASSIGNED_NAME)
        for m in team.members
    ]
    return EXPORT_HEADER.format(team_id=team.id) + "\n\n" + "\n".join(lines)


def export_filename(team_id: int) -> str:
    return EXPORT_FILENAME.format(team_id=team_id)


def export_is_current(state: RosterState, download: PendingDownload) -> bool:
    """True while ``download`` still matches its team in ``state``."""
    for team in state.teams:
        if export_filename(team.id) == download.filename:
            return format_team_text(team) == download.content
    return False


# -----------------------
# Controller
# -----------------------
class RosterManager:
    """
    Owns the single RosterState snapshot. Each operation computes a new snapshot,
    swaps it in, then notifies listeners. Nothing here raises for unknown ids.
    """

    def __init__(self, state: Optional[RosterState] = None, rng: Optional[RandomSource] = None):
        self._state = state if state is not None else RosterState()
        self._rng = rng if rng is not None else default_rng()
        self._listeners: List[Listener] = []

    @property
    def state(self) -> RosterState:
        return self._state

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def _commit(self, new_state: RosterState) -> RosterState:
        self._state = new_state
        for listener in self._listeners:
            listener(new_state)
        return new_state

    def generate(self) -> RosterState:
        teams = generate_teams(self._rng)
        logger.info("Generated roster #%d", self._state.generation + 1)
        return self._commit(self._state.model_copy(update={
            "teams": teams,
            "generation": self._state.generation + 1,
        }))

    def rename_member(self, team_id: int, identifier: int, new_name: str) -> RosterState:
        new_state = rename_member(self._state, team_id, identifier, new_name)
        if new_state is self._state:
            return new_state
        return self._commit(new_state)

    def set_search(self, search_term: str) -> RosterState:
        return self._commit(self._state.model_copy(update={"search_term": search_term}))

    def select_team(self, team_id: Optional[int]) -> RosterState:
        return self._commit(self._state.model_copy(update={"selected_team": team_id}))

    def filter(self, search_term: str) -> List[Team]:
        return filter_teams(self._state.teams, search_term)

    def filtered_teams(self) -> List[Team]:
        return self.filter(self._state.search_term)

    def export_team(self, team_id: int, saver: FileSaver) -> bool:
        """Hand team ``team_id`` to ``saver``. Returns False when the team is unknown."""
        team = self._state.team(team_id)
        if team is None:
            logger.debug("export ignored: team %s not in roster", team_id)
            return False

        filename = export_filename(team_id)
        try:
            saver.save(filename, format_team_text(team))
        except Exception:
            # fire-and-forget: saver problems never reach the user
            logger.warning("Saving %s failed", filename, exc_info=True)
        return True

    # render surface events
    def on_generate_requested(self) -> RosterState:
        return self.generate()

    def on_name_changed(self, team_id: int, identifier: int, text: str) -> RosterState:
        return self.rename_member(team_id, identifier, text)

    def on_search_changed(self, text: str) -> RosterState:
        return self.set_search(text)

    def on_team_clicked(self, team_id: int) -> RosterState:
        return self.select_team(team_id)

    def on_export_requested(self, team_id: int, saver: FileSaver) -> bool:
        return self.export_team(team_id, saver)
