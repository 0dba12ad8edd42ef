"""Caption table loader."""

import json
from functools import lru_cache
from pathlib import Path

from ...errors import LoadError
from .item_loader import DATA_DIR


LANG_FILE = DATA_DIR / "lang" / "en.json"


@lru_cache(maxsize=4)
def load_captions(path: Path = LANG_FILE) -> dict[str, str]:
    """Load a flat caption table from a JSON file.

    Returns:
        Dict of caption key to format string.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise LoadError(f"Cannot read language file {path}: {e}") from e

    if not isinstance(data, dict):
        raise LoadError(f"Language file {path} is not a caption table")

    return {str(k): str(v) for k, v in data.items()}


def clear_cache() -> None:
    """Clear the caption cache. Useful for testing or hot-reloading data."""
    load_captions.cache_clear()
