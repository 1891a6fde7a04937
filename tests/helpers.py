from roster_core.models import Member, RosterState, Team


class LastIndexRng:
    """Always picks j == i, so the shuffle leaves the pool in order."""

    def integers(self, low, high):
        return high - 1


class ScriptedRng:
    def __init__(self, picks):
        self.picks = list(picks)
        self.calls = []

    def integers(self, low, high):
        self.calls.append((low, high))
        return self.picks.pop(0)


def make_state(teams, **kwargs):
    """teams: {team_id: [(roll, name), ...]}"""
    return RosterState(
        teams=tuple(
            Team(id=tid, members=tuple(Member(identifier=r, name=n) for r, n in members))
            for tid, members in teams.items()
        ),
        **kwargs,
    )
