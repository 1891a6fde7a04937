import numpy as np
from roster_core.file_save import DownloadQueue
from roster_core.manager import RosterManager, filter_teams, rename_member
from roster_core.models import RosterState
from helpers import LastIndexRng, make_state

def _names(state):
    return {(t.id, m.identifier): m.name for t in state.teams for m in t.members}

def test_generate_replaces_roster_and_clears_names():
    mgr = RosterManager(rng=np.random.default_rng(1))
    mgr.generate()
    first = mgr.state.teams[0]
    mgr.rename_member(first.id, first.members[0].identifier, "Alice")
    assert "Alice" in _names(mgr.state).values()

    mgr.generate()
    assert mgr.state.generation == 2
    assert all(name == "" for name in _names(mgr.state).values())

def test_generate_keeps_search_and_selection():
    mgr = RosterManager(rng=LastIndexRng())
    mgr.set_search("4")
    mgr.select_team(3)
    mgr.generate()
    assert mgr.state.search_term == "4"
    assert mgr.state.selected_team == 3

def test_rename_is_local():
    mgr = RosterManager(rng=LastIndexRng())
    mgr.generate()
    before = _names(mgr.state)
    mgr.rename_member(3, 12, "Alice")
    after = _names(mgr.state)
    assert after[(3, 12)] == "Alice"
    del before[(3, 12)], after[(3, 12)]
    assert before == after

def test_rename_keeps_text_verbatim():
    state = make_state({1: [(1, ""), (2, "")]})
    out = rename_member(state, 1, 2, "  Bo  ")
    assert out.teams[0].members[1].name == "  Bo  "
    assert rename_member(out, 1, 2, "").teams[0].members[1].name == ""

def test_rename_unknown_ids_is_noop():
    mgr = RosterManager(rng=LastIndexRng())
    mgr.generate()
    mgr.rename_member(3, 12, "Alice")
    before = mgr.state
    mgr.rename_member(99, 12, "Ghost")       # unknown team
    mgr.rename_member(3, 1, "Ghost")         # roll number lives in another team
    mgr.rename_member(3, 500, "Ghost")       # unknown roll number
    assert mgr.state == before
    assert mgr.state.model_dump_json() == before.model_dump_json()

def test_rename_twice_is_idempotent():
    state = make_state({1: [(1, "")], 2: [(2, "")]})
    once = rename_member(state, 1, 1, "Sam")
    twice = rename_member(once, 1, 1, "Sam")
    assert once == twice

def test_filter_by_roll_number_substring():
    mgr = RosterManager(rng=LastIndexRng())
    mgr.generate()
    mgr.rename_member(1, 1, "Seven")  # named member, but no "7" in its team roll numbers
    ids = [t.id for t in mgr.filter("7")]
    # 7, 17, 27, 37, 47 sit in teams 2, 4, 6, 8, 11; 57 has no team
    assert ids == [2, 4, 6, 8, 11]

def test_filter_name_case_insensitive():
    state = make_state({
        1: [(1, "Alice")],
        2: [(2, "ALIAS")],
        3: [(3, "Bob")],
    })
    assert [t.id for t in filter_teams(state.teams, "ali")] == [1, 2]
    assert [t.id for t in filter_teams(state.teams, "ALI")] == [1, 2]

def test_filter_returns_whole_teams():
    state = make_state({1: [(1, "Alice"), (2, "Bob")]})
    teams = filter_teams(state.teams, "ali")
    assert [m.name for m in teams[0].members] == ["Alice", "Bob"]

def test_filter_empty_term_matches_all_and_is_idempotent():
    mgr = RosterManager(rng=LastIndexRng())
    mgr.generate()
    assert len(mgr.filter("")) == 12
    before = mgr.state
    assert mgr.filter("3") == mgr.filter("3")
    assert mgr.state is before

def test_filtered_teams_uses_stored_search():
    mgr = RosterManager(rng=LastIndexRng())
    mgr.generate()
    mgr.set_search("54")
    assert [t.id for t in mgr.filtered_teams()] == [12]

def test_select_team_does_not_gate_rename_or_export():
    mgr = RosterManager(rng=LastIndexRng())
    mgr.generate()
    mgr.select_team(1)
    mgr.rename_member(2, 6, "Kim")
    queue = DownloadQueue()
    assert mgr.export_team(2, queue)
    assert "Kim" in queue.items[0].content

def test_subscribers_see_every_snapshot():
    seen = []
    mgr = RosterManager(rng=LastIndexRng())
    mgr.subscribe(seen.append)
    mgr.generate()
    mgr.set_search("x")
    mgr.select_team(2)
    assert len(seen) == 3
    assert seen[-1] is mgr.state

def test_unknown_rename_does_not_notify():
    seen = []
    mgr = RosterManager(rng=LastIndexRng())
    mgr.generate()
    mgr.subscribe(seen.append)
    before = mgr.state
    assert mgr.rename_member(99, 1, "Ghost") is before
    assert mgr.rename_member(1, 55, "Ghost") is before  # 55 has no team
    assert seen == []
    mgr.rename_member(1, 1, "Ann")
    assert len(seen) == 1

def test_event_handlers_route_to_operations():
    mgr = RosterManager(rng=LastIndexRng())
    mgr.on_generate_requested()
    mgr.on_name_changed(1, 1, "Ann")
    mgr.on_search_changed("ann")
    mgr.on_team_clicked(1)
    queue = DownloadQueue()
    mgr.on_export_requested(1, queue)
    assert mgr.state.teams[0].members[0].name == "Ann"
    assert mgr.state.search_term == "ann"
    assert mgr.state.selected_team == 1
    assert queue.items[0].filename == "team1_details.txt"

def test_default_state_is_empty():
    mgr = RosterManager()
    assert mgr.state == RosterState()
    assert mgr.filtered_teams() == []
