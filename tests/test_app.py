import os

import pytest

from app import PAGE_REGISTRY
from domain.constants import SS_EXIT_REQUESTED, SS_MACHINE
from domain.models import Categories, Detail, Home, LocationList

APP_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'app.py'))


def test_page_registry_structure():
    """
    Tests that the PAGE_REGISTRY has the correct structure.
    """
    assert isinstance(PAGE_REGISTRY, dict)
    for key, value in PAGE_REGISTRY.items():
        assert "label" in value
        assert "render_func" in value
        assert callable(value["render_func"])


def test_every_screen_variant_is_registered():
    assert set(PAGE_REGISTRY) == {Home, Categories, LocationList, Detail}


@pytest.fixture
def at():
    from streamlit.testing.v1 import AppTest
    return AppTest.from_file(APP_PATH, default_timeout=30)


def _screen(at):
    return at.session_state[SS_MACHINE].screen


def test_tour_walkthrough(at):
    at.run()
    assert not at.exception
    assert _screen(at) == Home()

    at.button(key="start_tour").click().run()
    assert _screen(at) == Categories()

    at.button(key="category_Museums").click().run()
    assert _screen(at) == LocationList("Museums")

    at.button(key="location_2").click().run()
    assert _screen(at) == Detail("Museums", 2)
    assert at.session_state[SS_MACHINE].state.stack == (
        Home(), Categories(), LocationList("Museums"))

    at.button(key="topbar_back").click().run()
    assert _screen(at) == LocationList("Museums")


def test_home_cycle_disables_device_back(at):
    at.run()
    at.button(key="start_tour").click().run()
    at.button(key="category_Parks").click().run()
    at.button(key="topbar_home").click().run()
    state = at.session_state[SS_MACHINE].state
    assert state.screen == Home()
    assert state.stack == ()
    assert state.home_cycle_completed is True

    at.button(key="system_back").click().run()
    assert not at.exception
    assert _screen(at) == Home()
    assert SS_EXIT_REQUESTED not in at.session_state


def test_device_back_exits_before_home_cycle(at):
    at.run()
    at.button(key="system_back").click().run()
    assert at.session_state[SS_EXIT_REQUESTED] is True
    assert at.info[0].value == "You left Explore Boston."

    at.button(key="reopen").click().run()
    assert _screen(at) == Home()
    assert SS_EXIT_REQUESTED not in at.session_state


def test_home_action_on_home_opens_categories(at):
    at.run()
    at.button(key="topbar_home").click().run()
    assert _screen(at) == Categories()
    assert at.session_state[SS_MACHINE].state.home_cycle_completed is False


def test_bad_detail_deep_link_goes_back(at):
    at.query_params["route"] = "detail/Parks/999"
    at.run()
    assert not at.exception
    assert _screen(at) == LocationList("Parks")
