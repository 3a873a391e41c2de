import streamlit as st
from loguru import logger

from domain.constants import (
    APP_TITLE, QP_HOME_CYCLE, QP_ROUTE, SS_EXIT_REQUESTED, SS_MACHINE,
)
from domain.models import BackOutcome, Categories, Detail, Home, LocationList
from services.locations import LocationStore
from services.navigation import NavigationStateMachine
from ui.components import inject_base_css
from utils.log import configure_logging

# Import the screen rendering functions from the view modules
from views import home, categories, location_list, location_detail

# --- Page Registry ---
# Maps each screen variant to its label and rendering function.
PAGE_REGISTRY = {
    Home: {
        "label": "Home",
        "render_func": home.view,
    },
    Categories: {
        "label": "Categories",
        "render_func": categories.view,
    },
    LocationList: {
        "label": "List",
        "render_func": location_list.view,
    },
    Detail: {
        "label": "Detail",
        "render_func": location_detail.view,
    },
}


def _get_machine() -> NavigationStateMachine:
    """Session navigation state; a fresh session may start from query params."""
    if SS_MACHINE not in st.session_state:
        qs = st.query_params
        route = qs.get(QP_ROUTE)
        home_cycle = qs.get(QP_HOME_CYCLE) == '1'
        st.session_state[SS_MACHINE] = NavigationStateMachine.from_route(
            LocationStore.default(), route, home_cycle_completed=home_cycle)
        logger.info(f"New session at route={route or 'home'} home_cycle={home_cycle}")
    return st.session_state[SS_MACHINE]


def _sync_query_params(machine: NavigationStateMachine):
    st.query_params[QP_ROUTE] = machine.route
    if machine.state.home_cycle_completed:
        st.query_params[QP_HOME_CYCLE] = '1'


def _render_exit():
    st.info("You left Explore Boston.")
    if st.button("Reopen", key="reopen"):
        del st.session_state[SS_EXIT_REQUESTED]
        del st.session_state[SS_MACHINE]
        st.query_params.clear()
        st.rerun()


def main():
    """
    Main application router.

    Renders the screen for the current navigation state and offers a
    device-style back button in the sidebar.
    """
    configure_logging()
    st.set_page_config(page_title=APP_TITLE, layout="centered")
    inject_base_css()

    if st.session_state.get(SS_EXIT_REQUESTED):
        _render_exit()
        return

    machine = _get_machine()

    # --- Sidebar ---
    st.sidebar.title("Navigation")
    if st.sidebar.button("◁ Device back", key="system_back"):
        outcome = machine.system_back_gesture()
        if outcome is BackOutcome.PROPAGATED:
            st.session_state[SS_EXIT_REQUESTED] = True
        if outcome is not BackOutcome.CONSUMED:
            st.rerun()
    if machine.system_back_suppressed():
        st.sidebar.caption("Device back is disabled on Home.")

    # --- Page Rendering ---
    page_to_render = PAGE_REGISTRY[type(machine.screen)]["render_func"]
    page_to_render(machine)

    _sync_query_params(machine)

    # --- Footer ---
    st.sidebar.markdown("---")
    st.sidebar.caption(f"Route: {machine.route} | depth {len(machine.state.stack)}")


if __name__ == "__main__":
    main()
