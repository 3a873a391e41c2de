import streamlit as st

from ui.components import category_card, top_bar


def view(machine):
    top_bar(machine)
    store = machine.store
    for category in store.categories():
        if category_card(category, len(store.locations_for(category))):
            machine.select_category(category)
            st.rerun()
