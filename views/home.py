import streamlit as st

from domain.constants import START_TOUR_LABEL, WELCOME_BODY, WELCOME_HEADLINE
from ui.components import top_bar


def view(machine):
    top_bar(machine)
    st.markdown(
        f"""
        <div class="welcome">
            <h2>{WELCOME_HEADLINE}</h2>
            <p>{WELCOME_BODY}</p>
        </div>
        """,
        unsafe_allow_html=True
    )
    _, mid, _ = st.columns([2, 1, 2])
    with mid:
        if st.button(START_TOUR_LABEL, key="start_tour", type="primary"):
            machine.go_to_categories()
            st.rerun()
