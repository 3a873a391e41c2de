import html

import streamlit as st

from domain.constants import category_subtitle
from domain.models import Location
from .base import category_chip


def category_card(category: str, count: int) -> bool:
    """
    Displays a tappable card for one category. Returns True when opened.
    """
    with st.container(border=True):
        st.subheader(category)
        st.markdown(f"<p class='card-subtitle'>{html.escape(category_subtitle(category))}</p>",
                    unsafe_allow_html=True)
        return st.button(f"View {count} places", key=f"category_{category}")


def location_card(loc: Location) -> bool:
    """
    Displays a list entry with the location name and its one-line description.
    """
    with st.container(border=True):
        st.markdown(f"**{loc.name}**")
        st.caption(loc.description)
        return st.button("Details", key=f"location_{loc.id}")


def location_detail(loc: Location):
    st.markdown(category_chip(loc.category), unsafe_allow_html=True)
    st.header(loc.name)
    st.write(loc.description)
