"""Navigation state machine: Home -> Categories -> List -> Detail.

Transitions are pure: `transition(state, intent, store)` returns a new
NavigationState (plus a BackOutcome for back-type intents) and never touches
its input. `NavigationStateMachine` keeps the current state for a session and
exposes one method per intent for the UI layer.

Back-stack rules:
- push-producing intents append the current screen to the stack, unless the
  target equals the current screen (single-top, no duplicate entry);
- Back pops the top of the stack; an empty stack lands on Home;
- GoHome clears the stack and marks the home cycle as completed;
- the system back gesture on Home is swallowed once the home cycle is
  completed, otherwise it is left to the host (exit);
- any reference to an unknown category or (category, id) pair is recovered
  as a Back, without surfacing an error.
"""
from __future__ import annotations
from dataclasses import replace
from typing import Optional, Tuple
from urllib.parse import quote, unquote

from loguru import logger

from domain.constants import (
    APP_TITLE, CATEGORIES_TITLE, ROUTE_CATEGORIES, ROUTE_DETAIL, ROUTE_HOME,
    ROUTE_LIST, list_title,
)
from domain.models import (
    Back, BackOutcome, Categories, Detail, GoHome, GoToCategories, Home,
    Intent, Location, LocationList, NavigationState, Screen, SelectCategory,
    SelectItem, SystemBackGesture,
)
from services.locations import LocationStore


def _push(state: NavigationState, target: Screen) -> NavigationState:
    if target == state.screen:
        return state
    return replace(state, screen=target, stack=state.stack + (state.screen,))


def _pop(state: NavigationState) -> NavigationState:
    if not state.stack:
        return replace(state, screen=Home())
    return replace(state, screen=state.stack[-1], stack=state.stack[:-1])


def _fallback(state: NavigationState, reason: str) -> NavigationState:
    logger.warning(f"{reason}; going back from {route_for(state.screen)}")
    return _pop(state)


def _resolve_item(state: NavigationState, item, store: LocationStore) -> Optional[Location]:
    if isinstance(item, Location):
        found = store.get_location(item.category, item.id)
        return found if found == item else None
    # Bare id: only meaningful inside a category list.
    if isinstance(state.screen, LocationList):
        try:
            location_id = int(item)
        except (TypeError, ValueError):
            return None
        return store.get_location(state.screen.category, location_id)
    return None


def transition(state: NavigationState, intent: Intent,
               store: LocationStore) -> Tuple[NavigationState, Optional[BackOutcome]]:
    """Apply one intent. The outcome is only set for back-type intents."""
    if isinstance(intent, GoToCategories):
        return _push(state, Categories()), None

    if isinstance(intent, SelectCategory):
        if not store.has_category(intent.category):
            return _fallback(state, f"Unknown category {intent.category!r}"), None
        return _push(state, LocationList(intent.category)), None

    if isinstance(intent, SelectItem):
        loc = _resolve_item(state, intent.item, store)
        if loc is None:
            return _fallback(state, f"Unknown location {intent.item!r}"), None
        return _push(state, Detail(loc.category, loc.id)), None

    if isinstance(intent, Back):
        if isinstance(state.screen, Home) and not state.stack:
            return state, None
        return _pop(state), BackOutcome.HANDLED

    if isinstance(intent, GoHome):
        return NavigationState(screen=Home(), stack=(), home_cycle_completed=True), None

    if isinstance(intent, SystemBackGesture):
        if isinstance(state.screen, Home):
            if state.home_cycle_completed:
                return state, BackOutcome.CONSUMED
            return state, BackOutcome.PROPAGATED
        return _pop(state), BackOutcome.HANDLED

    raise TypeError(f"Unknown intent: {intent!r}")


def resolve_detail(state: NavigationState,
                   store: LocationStore) -> Tuple[NavigationState, Optional[Location]]:
    """Look up the location a Detail screen points at.

    When the pair does not exist the state is popped back, as if the user
    had pressed Back. Non-detail screens pass through unchanged.
    """
    if not isinstance(state.screen, Detail):
        return state, None
    loc = store.get_location(state.screen.category, state.screen.location_id)
    if loc is None:
        return _fallback(state, "Detail target not found"), None
    return state, loc


def resolve_list(state: NavigationState,
                 store: LocationStore) -> Tuple[NavigationState, bool]:
    """Pop back off a list for an unknown category. Returns (state, valid)."""
    if not isinstance(state.screen, LocationList):
        return state, False
    if not store.has_category(state.screen.category):
        return _fallback(state, f"Unknown category {state.screen.category!r}"), False
    return state, True


def system_back_suppressed(state: NavigationState) -> bool:
    return state.home_cycle_completed and isinstance(state.screen, Home)


# --- Routes ---

def route_for(screen: Screen) -> str:
    if isinstance(screen, Home):
        return ROUTE_HOME
    if isinstance(screen, Categories):
        return ROUTE_CATEGORIES
    if isinstance(screen, LocationList):
        return f"{ROUTE_LIST}/{quote(screen.category, safe='')}"
    if isinstance(screen, Detail):
        return f"{ROUTE_DETAIL}/{quote(screen.category, safe='')}/{screen.location_id}"
    raise TypeError(f"Unknown screen: {screen!r}")


def parse_route(route: str) -> Optional[Screen]:
    """Inverse of route_for. Returns None for anything malformed."""
    parts = (route or '').strip().strip('/').split('/')
    head, args = parts[0], parts[1:]
    if head == ROUTE_HOME and not args:
        return Home()
    if head == ROUTE_CATEGORIES and not args:
        return Categories()
    if head == ROUTE_LIST and len(args) == 1 and args[0]:
        return LocationList(unquote(args[0]))
    if head == ROUTE_DETAIL and len(args) == 2 and args[0]:
        try:
            location_id = int(args[1])
        except ValueError:
            return None
        return Detail(unquote(args[0]), location_id)
    return None


def drill_down_stack(screen: Screen) -> Tuple[Screen, ...]:
    """The stack a user builds by tapping through to `screen` from Home."""
    if isinstance(screen, Home):
        return ()
    if isinstance(screen, Categories):
        return (Home(),)
    if isinstance(screen, LocationList):
        return (Home(), Categories())
    if isinstance(screen, Detail):
        return (Home(), Categories(), LocationList(screen.category))
    raise TypeError(f"Unknown screen: {screen!r}")


def state_from_route(route: Optional[str], store: LocationStore,
                     home_cycle_completed: bool = False) -> NavigationState:
    """Rebuild a state from a deep link. Malformed routes start at Home.

    A list or detail under an unknown category lands on Categories; a detail
    with a bad id in a known category is left for resolve_detail so it falls
    back at render time.
    """
    screen = parse_route(route) if route else None
    if screen is None:
        if route:
            logger.warning(f"Ignoring malformed route {route!r}")
        return NavigationState(home_cycle_completed=home_cycle_completed)
    if isinstance(screen, (LocationList, Detail)) and not store.has_category(screen.category):
        logger.warning(f"Unknown category {screen.category!r} in route, opening categories")
        screen = Categories()
    return NavigationState(screen=screen, stack=drill_down_stack(screen),
                           home_cycle_completed=home_cycle_completed)


def title_for(screen: Screen, store: LocationStore) -> str:
    if isinstance(screen, Home):
        return APP_TITLE
    if isinstance(screen, Categories):
        return CATEGORIES_TITLE
    if isinstance(screen, LocationList):
        return list_title(screen.category)
    if isinstance(screen, Detail):
        loc = store.get_location(screen.category, screen.location_id)
        return loc.name if loc else ''
    raise TypeError(f"Unknown screen: {screen!r}")


class NavigationStateMachine:
    """Session-scoped holder of the current NavigationState."""

    def __init__(self, store: LocationStore, state: Optional[NavigationState] = None):
        self.store = store
        self._state = state or NavigationState()

    @classmethod
    def from_route(cls, store: LocationStore, route: Optional[str],
                   home_cycle_completed: bool = False) -> NavigationStateMachine:
        return cls(store, state_from_route(route, store, home_cycle_completed))

    @property
    def state(self) -> NavigationState:
        return self._state

    @property
    def screen(self) -> Screen:
        return self._state.screen

    @property
    def route(self) -> str:
        return route_for(self._state.screen)

    @property
    def title(self) -> str:
        return title_for(self._state.screen, self.store)

    def snapshot(self) -> NavigationState:
        return self._state

    def dispatch(self, intent: Intent) -> Optional[BackOutcome]:
        before = self._state
        self._state, outcome = transition(before, intent, self.store)
        logger.debug(f"{type(intent).__name__}: {route_for(before.screen)} -> "
                     f"{route_for(self._state.screen)} (depth {len(self._state.stack)})")
        return outcome

    def go_to_categories(self):
        self.dispatch(GoToCategories())

    def select_category(self, category: str):
        self.dispatch(SelectCategory(category))

    def select_item(self, item):
        self.dispatch(SelectItem(item))

    def back(self) -> Optional[BackOutcome]:
        return self.dispatch(Back())

    def go_home(self):
        self.dispatch(GoHome())

    def system_back_gesture(self) -> BackOutcome:
        return self.dispatch(SystemBackGesture())

    def resolve_detail(self) -> Optional[Location]:
        self._state, loc = resolve_detail(self._state, self.store)
        return loc

    def resolve_list(self) -> bool:
        self._state, valid = resolve_list(self._state, self.store)
        return valid

    def system_back_suppressed(self) -> bool:
        return system_back_suppressed(self._state)
