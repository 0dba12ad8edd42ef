"""Modifier Calculator.

Sums the effect of an actor's worn and held custom items on one stat.
"""

import math
from typing import Optional

from ..data.models.actor import Actor
from ..data.models.handle import ItemStack
from ..data.models.modifier import Modifier
from ..data.models.stat import StatType
from .catalog import ItemCatalog, ItemRegistry
from .eligibility import EligibilityFilter


class ModifierCalculator:
    """
    Aggregates item stats into a Modifier:
    - Passive items and armor as supplied by the host
    - Main hand and off hand, only when the actor is allowed to use them
    """

    def __init__(self, registry: ItemRegistry, eligibility: EligibilityFilter):
        self.registry = registry
        self.eligibility = eligibility

    def collect_items(
        self,
        actor: Actor,
        notify: bool = False,
        catalog: Optional[ItemCatalog] = None,
    ) -> list[ItemStack]:
        """
        Gather the stacks that count towards the actor's stats.

        Args:
            actor: Actor snapshot.
            notify: Tell the actor why a held item is ignored.
            catalog: Snapshot to resolve items against; current one if omitted.

        Returns:
            Stacks in no particular order; empty armor slots are dropped.
        """
        catalog = catalog if catalog is not None else self.registry.catalog
        items = [stack for stack in actor.passive_items if stack is not None]
        items.extend(stack for stack in actor.armor if stack is not None)

        for held in (actor.main_hand, actor.off_hand):
            if catalog.is_custom_item(held) and self.eligibility.allowed_for_stack(actor, held, notify, catalog):
                items.append(held)

        return items

    def get_modifier(self, actor: Actor, stat_type: StatType, notify: bool = False) -> Modifier:
        """
        Calculate the combined modifier for one stat.

        Args:
            actor: Actor snapshot.
            stat_type: Stat to aggregate.
            notify: Forwarded to the eligibility check of held items.

        Returns:
            Modifier; identity when nothing contributes.
        """
        catalog = self.registry.catalog
        bonuses: dict[str, list[float]] = {"min": [], "max": []}
        multipliers: dict[str, list[float]] = {"min": [], "max": []}

        for stack in self.collect_items(actor, notify, catalog):
            custom_item = catalog.resolve_from_tag(stack)
            stat = custom_item.get_stat(stat_type) if custom_item is not None else None
            if stat is None:
                continue

            for bound in ("min", "max"):
                if stat.is_percentage:
                    multipliers[bound].append(stat.effective(bound) / 100)
                else:
                    bonuses[bound].append(stat.effective(bound))

        # fsum is exactly rounded, so item order cannot change the result
        return Modifier(
            min_bonus=math.fsum(bonuses["min"]),
            max_bonus=math.fsum(bonuses["max"]),
            min_multiplier=math.fsum([1.0, *multipliers["min"]]),
            max_multiplier=math.fsum([1.0, *multipliers["max"]]),
        )

    def get_all_modifiers(self, actor: Actor) -> dict[StatType, Modifier]:
        """Modifier for every stat type."""
        return {stat_type: self.get_modifier(actor, stat_type) for stat_type in StatType}
