from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple, Union


@dataclass(frozen=True)
class Location:
    id: int
    name: str
    category: str
    description: str


def location_from_dict(d: Dict[str, Any]) -> Location:
    """Build a Location from a JSON record, ignoring unknown keys."""
    return Location(
        id=int(d['id']),
        name=str(d['name']),
        category=str(d['category']),
        description=str(d.get('description', '')),
    )


# --- Screens ---
# Closed set of screen variants. Anything that interprets a screen
# matches on these four classes and raises TypeError otherwise.

@dataclass(frozen=True)
class Home:
    pass


@dataclass(frozen=True)
class Categories:
    pass


@dataclass(frozen=True)
class LocationList:
    category: str


@dataclass(frozen=True)
class Detail:
    category: str
    location_id: int


Screen = Union[Home, Categories, LocationList, Detail]


# --- Intents ---

@dataclass(frozen=True)
class GoToCategories:
    pass


@dataclass(frozen=True)
class SelectCategory:
    category: str


@dataclass(frozen=True)
class SelectItem:
    # Either a Location or a bare id resolved within the current list.
    item: Union[Location, int]


@dataclass(frozen=True)
class Back:
    pass


@dataclass(frozen=True)
class GoHome:
    pass


@dataclass(frozen=True)
class SystemBackGesture:
    pass


Intent = Union[GoToCategories, SelectCategory,
               SelectItem, Back, GoHome, SystemBackGesture]


class BackOutcome(str, Enum):
    HANDLED = 'handled'        # popped the stack
    CONSUMED = 'consumed'      # suppressed on Home, nothing happens
    PROPAGATED = 'propagated'  # host default applies (e.g. exit)


@dataclass(frozen=True)
class NavigationState:
    screen: Screen = field(default_factory=Home)
    stack: Tuple[Screen, ...] = ()
    home_cycle_completed: bool = False
