"""Location store: read-only lookups over the tour dataset.

The dataset is loaded once per store from data/locations.json. If that file
is missing or holds bad records the built-in list in domain.constants is used.
"""
from __future__ import annotations
from typing import Iterable, List, Optional

from loguru import logger

from domain.constants import DEFAULT_LOCATIONS
from domain.models import Location, location_from_dict
from services import persistence


class LocationStore:

    def __init__(self, locations: Iterable[Location]):
        self._locations = tuple(locations)
        seen = set()
        for loc in self._locations:
            if loc.id in seen:
                raise ValueError(f"duplicate location id: {loc.id}")
            seen.add(loc.id)
        self._categories = list(dict.fromkeys(
            loc.category for loc in self._locations))

    @classmethod
    def from_records(cls, records: Iterable[dict]) -> LocationStore:
        return cls(location_from_dict(r) for r in records)

    @classmethod
    def default(cls) -> LocationStore:
        """Store backed by data/locations.json, falling back to built-in data."""
        records = persistence.load_list('locations')
        if records:
            try:
                return cls.from_records(records)
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(f"Invalid locations data, using built-in set: {e}")
        else:
            logger.info("No locations file, using built-in set")
        return cls.from_records(DEFAULT_LOCATIONS)

    @property
    def locations(self) -> List[Location]:
        return list(self._locations)

    def categories(self) -> List[str]:
        return list(self._categories)

    def has_category(self, category: str) -> bool:
        return category in self._categories

    def locations_for(self, category: str) -> List[Location]:
        return [loc for loc in self._locations if loc.category == category]

    def get_location(self, category: str, location_id: int) -> Optional[Location]:
        return next((loc for loc in self._locations
                     if loc.category == category and loc.id == location_id), None)
