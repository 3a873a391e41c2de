import importlib
from unittest.mock import MagicMock

import pytest

from domain.constants import DEFAULT_LOCATIONS
from domain.models import Categories, Detail, Home, LocationList, NavigationState
from services.locations import LocationStore
from services.navigation import NavigationStateMachine
from ui.components import category_chip
from views import location_detail, location_list

top_bar_mod = importlib.import_module("ui.components.top_bar")


def _fake_st(clicked_key=None):
    st = MagicMock()
    st.columns.return_value = [MagicMock(), MagicMock(), MagicMock()]
    st.button.side_effect = lambda label, key=None, **kw: key == clicked_key
    return st


@pytest.fixture
def store():
    return LocationStore.from_records(DEFAULT_LOCATIONS)


def test_top_bar_home_on_home_goes_to_categories(store, monkeypatch):
    monkeypatch.setattr(top_bar_mod, 'st', _fake_st("topbar_home"))
    m = NavigationStateMachine(store)
    top_bar_mod.top_bar(m)
    assert m.screen == Categories()
    assert m.state.home_cycle_completed is False


def test_top_bar_home_elsewhere_clears_stack(store, monkeypatch):
    monkeypatch.setattr(top_bar_mod, 'st', _fake_st("topbar_home"))
    m = NavigationStateMachine.from_route(store, "list/Parks")
    top_bar_mod.top_bar(m)
    assert m.state == NavigationState(screen=Home(), stack=(), home_cycle_completed=True)


def test_top_bar_hides_back_on_home(store, monkeypatch):
    fake = _fake_st()
    monkeypatch.setattr(top_bar_mod, 'st', fake)
    top_bar_mod.top_bar(NavigationStateMachine(store))
    keys = [c.kwargs.get('key') for c in fake.button.call_args_list]
    assert keys == ["topbar_home"]


def test_detail_view_with_bad_pair_reruns_without_rendering(store, monkeypatch):
    fake = _fake_st()
    monkeypatch.setattr(location_detail, 'st', fake)
    rendered = MagicMock()
    monkeypatch.setattr(location_detail, 'location_detail', rendered)
    m = NavigationStateMachine.from_route(store, "detail/Museums/5")
    location_detail.view(m)
    fake.rerun.assert_called_once()
    rendered.assert_not_called()
    assert m.screen == LocationList("Museums")


def test_detail_view_renders_location(store, monkeypatch):
    monkeypatch.setattr(location_detail, 'st', _fake_st())
    monkeypatch.setattr(top_bar_mod, 'st', _fake_st())
    rendered = MagicMock()
    monkeypatch.setattr(location_detail, 'location_detail', rendered)
    m = NavigationStateMachine.from_route(store, "detail/Restaurants/6")
    location_detail.view(m)
    rendered.assert_called_once_with(store.get_location("Restaurants", 6))
    assert m.screen == Detail("Restaurants", 6)


def test_list_view_with_unknown_category_reruns_without_rendering(store, monkeypatch):
    fake = _fake_st()
    monkeypatch.setattr(location_list, 'st', fake)
    card = MagicMock(return_value=False)
    monkeypatch.setattr(location_list, 'location_card', card)
    m = NavigationStateMachine(store, NavigationState(
        screen=LocationList("Bars"), stack=(Home(), Categories())))
    location_list.view(m)
    fake.rerun.assert_called_once()
    card.assert_not_called()
    assert m.screen == Categories()


def test_list_view_renders_cards(store, monkeypatch):
    monkeypatch.setattr(location_list, 'st', _fake_st())
    monkeypatch.setattr(top_bar_mod, 'st', _fake_st())
    card = MagicMock(return_value=False)
    monkeypatch.setattr(location_list, 'location_card', card)
    m = NavigationStateMachine.from_route(store, "list/Museums")
    location_list.view(m)
    assert [c.args[0].id for c in card.call_args_list] == [1, 2]


def test_top_bar_escapes_title(store, monkeypatch):
    fake = _fake_st()
    monkeypatch.setattr(top_bar_mod, 'st', fake)
    s = LocationStore.from_records([
        {"id": 1, "name": "<b>Bold</b>", "category": "Odd", "description": ""}])
    top_bar_mod.top_bar(NavigationStateMachine.from_route(s, "detail/Odd/1"))
    html_arg = fake.markdown.call_args.args[0]
    assert "&lt;b&gt;Bold&lt;/b&gt;" in html_arg
    assert "<b>" not in html_arg


def test_category_chip_escapes_markup():
    assert category_chip("<img src=x>") == \
        '<span class="category-chip">&lt;img src=x&gt;</span>'
