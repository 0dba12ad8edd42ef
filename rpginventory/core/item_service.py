"""Item Service.

Wires the catalog, eligibility, modifier and lore components together
for the host plugin.
"""

import logging
from pathlib import Path
from typing import Optional

from ..data.loaders import load_captions
from ..data.loaders.item_loader import ITEMS_FILE, ItemSource
from ..data.models.actor import Actor
from ..data.models.handle import AIR, ITEM_TAG, ItemStack
from ..data.models.item import ClassedItem, CustomItem
from ..data.models.modifier import Modifier
from ..data.models.stat import StatType
from .catalog import ItemCatalog, ItemRegistry
from .eligibility import EligibilityFilter, Messenger, PetLookup
from .language import Language
from .lore import LoreRenderer
from .modifier_calculator import ModifierCalculator


logger = logging.getLogger(__name__)


class ItemService:
    """
    Entry point used by the rest of the plugin.
    """

    def __init__(
        self,
        language: Language,
        renderer: Optional[LoreRenderer] = None,
        registry: Optional[ItemRegistry] = None,
        pets: Optional[PetLookup] = None,
        messenger: Optional[Messenger] = None,
    ):
        self.registry = registry or ItemRegistry()
        self.language = language
        self.renderer = renderer or LoreRenderer(language)
        self.eligibility = EligibilityFilter(self.registry, language, pets, messenger)
        self.calculator = ModifierCalculator(self.registry, self.eligibility)

    @classmethod
    def from_settings(cls, settings, **kwargs) -> "ItemService":
        """Build a service from a Settings object; items are not loaded yet."""
        language = Language(load_captions(Path(settings.LANG_FILE)))
        renderer = LoreRenderer(language, settings.LORE_PATTERN, settings.SEPARATOR)
        return cls(language, renderer, **kwargs)

    def initialize(self, source: ItemSource = ITEMS_FILE) -> bool:
        """
        Load the items config.

        The new catalog is only installed when it holds at least one item,
        so a failed reload leaves the current items in place.

        Returns:
            False if loading failed or produced no items.
        """
        try:
            catalog = ItemCatalog.load(source)
        except Exception:
            logger.exception("Failed to load items")
            return False

        logger.info("%d item(s) has been loaded", len(catalog))
        if len(catalog) == 0:
            return False

        self.registry.install(catalog)
        return True

    # Catalog access

    def list_items(self) -> list[str]:
        return self.registry.catalog.list()

    def get_item(self, item_id: str) -> Optional[CustomItem]:
        return self.registry.catalog.get(item_id)

    def get_custom_item(self, stack: Optional[ItemStack]) -> Optional[CustomItem]:
        return self.registry.catalog.resolve_from_tag(stack)

    def create_stack(self, item_id: str) -> ItemStack:
        """
        Build the tagged stack handed out for an item.

        Returns:
            The item stack, or AIR if the id is unknown.
        """
        item = self.get_item(item_id)
        if item is None:
            return AIR

        stack = ItemStack(
            texture=item.texture,
            name=item.name,
            lore=tuple(self.renderer.render(item)),
        )
        return stack.with_tag(ITEM_TAG, item.id)

    # Gameplay

    def is_allowed(self, actor: Actor, item: ClassedItem, notify: bool = False) -> bool:
        return self.eligibility.is_allowed(actor, item, notify)

    def allowed_for_stack(self, actor: Actor, stack: Optional[ItemStack], notify: bool = False) -> bool:
        return self.eligibility.allowed_for_stack(actor, stack, notify)

    def get_modifier(self, actor: Actor, stat_type: StatType, notify: bool = False) -> Modifier:
        return self.calculator.get_modifier(actor, stat_type, notify)

    def render_lore(self, item: CustomItem) -> list[str]:
        return self.renderer.render(item)
