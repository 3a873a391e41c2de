import html

import streamlit as st

from domain.models import Home


def top_bar(machine):
    """Title row with Back (hidden on Home) and Home actions.

    On the Home screen the Home action is a shortcut into Categories;
    everywhere else it clears the stack and returns Home.
    """
    on_home = isinstance(machine.screen, Home)
    left, mid, right = st.columns([1, 6, 1])
    with left:
        if not on_home and st.button("←", key="topbar_back", help="Back"):
            machine.back()
            st.rerun()
    with mid:
        st.markdown(f"<div class='topbar-title'>{html.escape(machine.title)}</div>",
                    unsafe_allow_html=True)
    with right:
        if st.button("⌂", key="topbar_home", help="Home"):
            if on_home:
                machine.go_to_categories()
            else:
                machine.go_home()
            st.rerun()
