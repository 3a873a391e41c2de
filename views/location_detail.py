import streamlit as st

from ui.components import location_detail, top_bar


def view(machine):
    """Detail for one location. Bad (category, id) pairs silently go back."""
    loc = machine.resolve_detail()
    if loc is None:
        st.rerun()
        return
    top_bar(machine)
    location_detail(loc)
