import streamlit as st
import yaml
from roster_core.config import SETTINGS_PATH, save_settings
from roster_core.validation import check_roster, run_self_test
from roster_core.ui_state import load_app_config, ensure_state, get_manager

cfg = load_app_config()
ensure_state(cfg)

st.title("Admin & Self-Test")

if st.button("Run Self-Test"):
    results = run_self_test()
    for label, ok in results["tests"]:
        (st.success if ok else st.error)(label)

st.subheader("Current roster check")
problems = check_roster(get_manager().state)
if problems:
    for p in problems:
        st.error(p)
else:
    st.write("Every team has its full size and no roll number sits twice.")

st.subheader("Settings")
with open(SETTINGS_PATH, "r", encoding="utf-8") as f:
    current = f.read()
text = st.text_area("settings.yaml", value=current, height=220)
if st.button("Save settings"):
    try:
        save_settings(SETTINGS_PATH, text)
    except (ValueError, yaml.YAMLError) as exc:
        st.error(f"Settings not saved: {exc}")
    else:
        st.success("Settings saved. A new random seed applies to new sessions.")

exceptions = st.session_state.get("exceptions", [])
st.subheader("Exception Log")
if exceptions:
    for exc in exceptions:
        st.error(exc)
else:
    st.write("No exceptions recorded.")
