"""
This package provides a collection of reusable UI components for the Streamlit application.

It is organized into several modules, each containing a specific category of components:
- `base`: CSS injection and small HTML snippets like the category chip.
- `cards`: Category and location cards plus the detail body.
- `top_bar`: The title row with Back and Home actions shared by every screen.

By importing the components here, we provide a single, consistent access point
for the rest of the application (`from ui.components import ...`).
"""

from .base import (
    inject_base_css,
    category_chip,
)

from .cards import (
    category_card,
    location_card,
    location_detail,
)

from .top_bar import (
    top_bar,
)
