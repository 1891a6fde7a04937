# app.py
import streamlit as st

from roster_core.config import ui_css
from roster_core.manager import export_filename
from roster_core.ui_state import (
    load_app_config,
    ensure_state,
    get_manager,
    get_downloads,
    name_widget_key,
)

# ---------- Page & Theme ----------
cfg = load_app_config()
st.set_page_config(page_title=cfg.page_title, layout="wide")
st.markdown(ui_css(), unsafe_allow_html=True)

ensure_state(cfg)


# ---------- Event handlers (render surface -> RosterManager) ----------
def _on_generate():
    get_manager().on_generate_requested()
    get_downloads().clear()

def _on_search():
    get_manager().on_search_changed(st.session_state["search_box"])

def _on_name(team_id: int, identifier: int, key: str):
    get_manager().on_name_changed(team_id, identifier, st.session_state[key])

def _on_select(team_id: int):
    get_manager().on_team_clicked(team_id)

def _on_export(team_id: int):
    get_manager().on_export_requested(team_id, get_downloads())

def _on_downloaded(filename: str):
    get_downloads().pop(filename)


# ---------- Header ----------
st.markdown(
    f"""
<div style="text-align:center;margin-bottom:1.5rem">
  <h1 style="color:#312e81">👥 {cfg.page_title}</h1>
  <div class="small" style="font-size:1rem">Efficiently manage and organize your teams</div>
</div>
""",
    unsafe_allow_html=True,
)

mgr = get_manager()
state = mgr.state

search_col, regen_col = st.columns([3, 1])
with search_col:
    st.session_state.setdefault("search_box", state.search_term)
    st.text_input(
        "Search",
        key="search_box",
        placeholder="🔍 Search by roll number or name...",
        label_visibility="collapsed",
        on_change=_on_search,
    )
with regen_col:
    st.button("🔄 Regenerate Teams", type="primary", use_container_width=True, on_click=_on_generate)


# ---------- Team grid ----------
def _render_team(team):
    active = "active" if state.selected_team == team.id else ""
    with st.container(border=True):
        head_l, head_r = st.columns([2, 1])
        with head_l:
            st.markdown(f'<span class="team-chip {active}">Team {team.id}</span>', unsafe_allow_html=True)
        with head_r:
            st.button("Select", key=f"select_{team.id}", on_click=_on_select, args=(team.id,),
                      use_container_width=True, disabled=bool(active))

        for m in team.members:
            key = name_widget_key(state.generation, team.id, m.identifier)
            if key not in st.session_state:
                st.session_state[key] = m.name
            c1, c2 = st.columns([1, 3])
            with c1:
                st.markdown(f'<span class="roll">#{m.identifier}</span>', unsafe_allow_html=True)
            with c2:
                st.text_input(
                    f"Name for roll {m.identifier}",
                    key=key,
                    placeholder="Enter name",
                    label_visibility="collapsed",
                    on_change=_on_name,
                    args=(team.id, m.identifier, key),
                )

        pending = get_downloads().get(export_filename(team.id))
        if pending is None:
            st.button("⬇ Export team", key=f"export_{team.id}", on_click=_on_export, args=(team.id,),
                      use_container_width=True)
        else:
            st.download_button(
                f"Save {pending.filename}",
                data=pending.content.encode("utf-8"),
                file_name=pending.filename,
                mime="text/plain",
                key=f"dl_{team.id}",
                on_click=_on_downloaded,
                args=(pending.filename,),
                use_container_width=True,
            )


teams = mgr.filtered_teams()
if not teams:
    st.info(f"No teams match “{state.search_term}”.")
else:
    for row_start in range(0, len(teams), cfg.grid_columns):
        cols = st.columns(cfg.grid_columns)
        for col, team in zip(cols, teams[row_start:row_start + cfg.grid_columns]):
            with col:
                _render_team(team)

exceptions = st.session_state.get("exceptions", [])
if exceptions:
    with st.expander("Warnings"):
        for exc in exceptions:
            st.warning(exc)
