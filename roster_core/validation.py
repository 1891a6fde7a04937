# FILE: roster_core/validation.py
from typing import List

from roster_core.constants import POOL_SIZE, SEATS, TEAM_SIZES
from roster_core.models import RosterState


def check_roster(state: RosterState) -> List[str]:
    """
    Return a list of roster problems; empty when the roster is well-formed.
    Teams follow TEAM_SIZES and hold distinct roll numbers from 1..POOL_SIZE;
    the POOL_SIZE - SEATS roll numbers left over stay unassigned.
    """
    problems = []
    if len(state.teams) != len(TEAM_SIZES):
        problems.append(f"Expected {len(TEAM_SIZES)} teams, found {len(state.teams)}")

    ids = [t.id for t in state.teams]
    if ids != list(range(1, len(state.teams) + 1)):
        problems.append(f"Team ids out of order: {ids}")

    for team, size in zip(state.teams, TEAM_SIZES):
        if len(team.members) != size:
            problems.append(f"Team {team.id} has {len(team.members)} members, expected {size}")

    seen = [m.identifier for t in state.teams for m in t.members]
    dupes = sorted({x for x in seen if seen.count(x) > 1})
    if dupes:
        problems.append(f"Roll numbers on more than one seat: {dupes}")
    outside = sorted({x for x in seen if not 1 <= x <= POOL_SIZE})
    if outside:
        problems.append(f"Roll numbers outside 1..{POOL_SIZE}: {outside}")
    if len(seen) != SEATS:
        problems.append(f"Expected {SEATS} seated roll numbers, found {len(seen)}")
    return problems


def run_self_test(seed: int = 42):
    """
    Run a basic suite of self-tests.
    """
    results = {"tests": []}
    from roster_core.generator import default_rng
    from roster_core.manager import RosterManager, format_team_text
    from roster_core.file_save import DownloadQueue

    mgr = RosterManager(rng=default_rng(seed))
    mgr.generate()
    results["tests"].append(("Distinct roll numbers on every seat", not check_roster(mgr.state)))
    results["tests"].append(("Team sizes six 5s then six 4s", [len(t.members) for t in mgr.state.teams] == TEAM_SIZES))

    first = mgr.state.teams[0]
    mgr.rename_member(first.id, first.members[0].identifier, "Self Test")
    before = mgr.state
    mgr.rename_member(99, 1, "nobody")
    results["tests"].append(("Unknown rename is a no-op", mgr.state == before))

    mgr.generate()
    results["tests"].append(("Regenerate clears names", all(m.name == "" for t in mgr.state.teams for m in t.members)))

    queue = DownloadQueue()
    mgr.export_team(99, queue)
    results["tests"].append(("Unknown export saves nothing", len(queue) == 0))
    mgr.export_team(1, queue)
    results["tests"].append(("Export text format", bool(queue.items) and queue.items[0].content == format_team_text(mgr.state.teams[0])))
    return results
