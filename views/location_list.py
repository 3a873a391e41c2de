import streamlit as st

from ui.components import location_card, top_bar


def view(machine):
    """Locations in one category. An unknown category silently goes back."""
    if not machine.resolve_list():
        st.rerun()
        return
    top_bar(machine)
    for loc in machine.store.locations_for(machine.screen.category):
        if location_card(loc):
            machine.select_item(loc)
            st.rerun()
