"""
This module contains centralized constants used throughout the application,
ensuring a single source of truth for titles, route names and the built-in
tour dataset.
"""

APP_TITLE = "Explore Boston"
WELCOME_HEADLINE = "Welcome!"
WELCOME_BODY = "Take a quick tour through Boston’s highlights."
START_TOUR_LABEL = "Start Tour"

CATEGORIES_TITLE = "Categories"

# Data file holding the tour locations (see utils.paths for lookup order)
LOCATIONS_FILE = 'locations.json'
DATA_DIR_ENV = 'EXPLORE_BOSTON_DATA_DIR'
LOG_LEVEL_ENV = 'EXPLORE_BOSTON_LOG_LEVEL'

# Route strings, one per screen variant
ROUTE_HOME = 'home'
ROUTE_CATEGORIES = 'categories'
ROUTE_LIST = 'list'
ROUTE_DETAIL = 'detail'

# Query params mirrored by the router so a reload can restore state
QP_ROUTE = 'route'
QP_HOME_CYCLE = 'home_cycle'

# Session state keys
SS_MACHINE = 'nav_machine'
SS_EXIT_REQUESTED = 'exit_requested'

# Built-in dataset, used when data/locations.json is missing or unreadable.
DEFAULT_LOCATIONS = [
    {'id': 1, 'name': "Museum of Fine Arts", 'category': "Museums",
     'description': "World-class collection spanning cultures and eras."},
    {'id': 2, 'name': "MIT Museum", 'category': "Museums",
     'description': "Inventive exhibits on science and technology."},
    {'id': 3, 'name': "Boston Common", 'category': "Parks",
     'description': "America’s oldest public park."},
    {'id': 4, 'name': "Public Garden", 'category': "Parks",
     'description': "Iconic swan boats and Victorian landscaping."},
    {'id': 5, 'name': "Neptune Oyster", 'category': "Restaurants",
     'description': "Beloved for its lobster roll and raw bar."},
    {'id': 6, 'name': "Oleana", 'category': "Restaurants",
     'description': "Creative Eastern Mediterranean plates."},
]


def list_title(category: str) -> str:
    return f"All {category}"


def category_subtitle(category: str) -> str:
    return f"Tap to view all {category}"
