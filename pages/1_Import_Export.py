import streamlit as st
from roster_core.export_pdf import render_roster_pdf
from roster_core.io import (
    roster_to_dataframe,
    save_roster_csv_bytes,
    generate_names_template_csv_bytes,
    load_names_csv,
    apply_names,
)
from roster_core.ui_state import load_app_config, ensure_state, get_manager

cfg = load_app_config()
ensure_state(cfg)

st.title("Import & Export")
mgr = get_manager()

st.subheader("Current roster")
st.dataframe(roster_to_dataframe(mgr.state), hide_index=True, use_container_width=True)

col1, col2, col3 = st.columns(3)
with col1:
    st.download_button(
        "Download roster CSV",
        data=save_roster_csv_bytes(mgr.state),
        file_name="roster.csv",
        mime="text/csv",
        use_container_width=True,
    )
with col2:
    st.download_button(
        "Download printable PDF",
        data=render_roster_pdf(mgr.state, title=cfg.page_title),
        file_name="roster.pdf",
        mime="application/pdf",
        use_container_width=True,
    )
with col3:
    st.download_button(
        "names_template.csv",
        data=generate_names_template_csv_bytes(mgr.state),
        file_name="names_template.csv",
        mime="text/csv",
        use_container_width=True,
    )

st.subheader("Import names")
st.write("Upload a CSV with a roll number column and a name column. Names are matched by roll number.")
uploaded_file = st.file_uploader("Upload names CSV", type=["csv"])
if uploaded_file and st.button("Apply names", type="primary"):
    try:
        names = load_names_csv(uploaded_file)
    except ValueError as exc:
        st.error(str(exc))
    else:
        unknown = apply_names(mgr, names)
        # drop cached name widgets so the roster page shows imported names
        for key in [k for k in st.session_state.keys() if str(k).startswith("name_")]:
            del st.session_state[key]
        st.success(f"Applied {len(names) - len(unknown)} names.")
        if unknown:
            st.warning(f"Roll numbers not in the roster: {unknown}")
