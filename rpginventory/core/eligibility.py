"""Eligibility Filter.

Decides whether an actor may use a level/class gated item.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Callable, Optional, Protocol

from ..data.models.actor import Actor
from ..data.models.handle import ItemStack
from ..data.models.item import ClassedItem, PetItem
from .catalog import ItemCatalog, ItemRegistry
from .language import Language


Messenger = Callable[[Actor, str], None]


class PetLookup(Protocol):
    """Resolves pet spawn items; supplied by the pet subsystem."""

    def get_pet_from_item(self, stack: ItemStack) -> Optional[PetItem]:
        ...


class DenialReason(StrEnum):
    LEVEL = "level"
    CLASS = "class"


@dataclass(frozen=True)
class EligibilityResult:
    """Outcome of an eligibility check."""

    allowed: bool
    reason: Optional[DenialReason] = None
    message: Optional[str] = None

    def __bool__(self) -> bool:
        return self.allowed


def check_level(actor: Actor, required: Optional[int]) -> bool:
    return required is None or actor.level >= required


def check_class(actor: Actor, classes: Optional[tuple[str, ...]]) -> bool:
    return classes is None or actor.class_name in classes


class EligibilityFilter:
    """
    Level and class gating for custom items and pets.
    """

    def __init__(
        self,
        registry: ItemRegistry,
        language: Language,
        pets: Optional[PetLookup] = None,
        messenger: Optional[Messenger] = None,
    ):
        self.registry = registry
        self.language = language
        self.pets = pets
        self.messenger = messenger

    def check(self, actor: Actor, item: ClassedItem) -> EligibilityResult:
        """
        Evaluate an item against an actor without notifying anyone.

        Level is checked before class; the first failure wins.
        """
        if not check_level(actor, item.level):
            return EligibilityResult(
                allowed=False,
                reason=DenialReason.LEVEL,
                message=self.language.get_caption("error.item.level", item.level),
            )

        if not check_class(actor, item.classes):
            return EligibilityResult(
                allowed=False,
                reason=DenialReason.CLASS,
                message=self.language.get_caption("error.item.class", item.classes_string),
            )

        return EligibilityResult(allowed=True)

    def is_allowed(self, actor: Actor, item: ClassedItem, notify: bool = False) -> bool:
        """
        Check an item, sending the denial message to the actor if asked.

        Args:
            actor: Actor snapshot.
            item: Custom item or pet.
            notify: Send the localized denial reason through the messenger.

        Returns:
            True if the actor meets both the level and class requirement.
        """
        result = self.check(actor, item)
        if not result.allowed and notify and self.messenger is not None:
            self.messenger(actor, result.message)
        return result.allowed

    def resolve(self, stack: Optional[ItemStack], catalog: Optional[ItemCatalog] = None) -> Optional[ClassedItem]:
        """Find the gated item behind a stack, if any.

        Pass ``catalog`` to keep using a snapshot the caller already holds.
        """
        if stack is None:
            return None

        catalog = catalog if catalog is not None else self.registry.catalog
        custom_item = catalog.resolve_from_tag(stack)
        if custom_item is not None:
            return custom_item

        if self.pets is not None:
            return self.pets.get_pet_from_item(stack)
        return None

    def allowed_for_stack(
        self,
        actor: Actor,
        stack: Optional[ItemStack],
        notify: bool = False,
        catalog: Optional[ItemCatalog] = None,
    ) -> bool:
        """Stacks that are neither custom items nor pets are always allowed."""
        item = self.resolve(stack, catalog)
        if item is None:
            return True
        return self.is_allowed(actor, item, notify)
