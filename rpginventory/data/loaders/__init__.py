# Data Loaders
from .item_loader import (
    DATA_DIR,
    ITEMS_FILE,
    load_items,
    read_config,
)
from .lang_loader import (
    LANG_FILE,
    load_captions,
)

__all__ = [
    # Item loaders
    "DATA_DIR",
    "ITEMS_FILE",
    "load_items",
    "read_config",
    # Language loaders
    "LANG_FILE",
    "load_captions",
]
