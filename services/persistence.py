import json
from typing import List, Dict, Any, Optional

from loguru import logger

from domain.constants import LOCATIONS_FILE
from utils.paths import resolve_data_file

FILES = {
    'locations': LOCATIONS_FILE,
}


def _path(key: str) -> Optional[str]:
    return resolve_data_file(FILES[key])


def load_list(key: str) -> List[Dict[str, Any]]:
    """Read a JSON list from the data dir. Missing or malformed files yield []."""
    file_path = _path(key)
    if not file_path:
        logger.debug(f"No data file for '{key}'")
        return []
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Could not read {file_path}: {e}")
        return []
    if not isinstance(data, list):
        logger.warning(f"{file_path} does not hold a list, ignoring")
        return []
    return data
