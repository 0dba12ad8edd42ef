# Core item engine modules
from .catalog import ItemCatalog, ItemRegistry
from .language import Language
from .eligibility import (
    EligibilityFilter,
    EligibilityResult,
    DenialReason,
    PetLookup,
    check_level,
    check_class,
)
from .modifier_calculator import ModifierCalculator
from ..text import colored_line
from .lore import LoreRenderer, DEFAULT_PATTERN
from .item_service import ItemService

__all__ = [
    # Catalog
    "ItemCatalog",
    "ItemRegistry",
    "Language",
    # Eligibility
    "EligibilityFilter",
    "EligibilityResult",
    "DenialReason",
    "PetLookup",
    "check_level",
    "check_class",
    # Modifiers
    "ModifierCalculator",
    # Lore
    "LoreRenderer",
    "colored_line",
    "DEFAULT_PATTERN",
    # Facade
    "ItemService",
]
