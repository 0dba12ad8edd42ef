"""Lore Renderer.

Expands the configured lore pattern into the description lines of an item.
"""

from collections.abc import Sequence

from ..data.models.item import CustomItem
from ..text import colored_line
from .language import Language


UNBREAKABLE = "_UNBREAKABLE_"
DROP = "_DROP_"
SEPARATOR = "_SEPARATOR_"
LEVEL = "_LEVEL_"
CLASS = "_CLASS_"
LORE = "_LORE_"
SKILLS = "_SKILLS_"
STATS = "_STATS_"

DEFAULT_PATTERN = (
    UNBREAKABLE, DROP, SEPARATOR,
    LEVEL, CLASS, SEPARATOR,
    LORE, SEPARATOR,
    SKILLS, SEPARATOR,
    STATS,
)


class LoreRenderer:
    """
    Renders item lore from a token pattern.

    Directive tokens expand to zero or more lines depending on the item;
    any other token is copied as a colored literal line.
    """

    def __init__(self, language: Language, pattern: Sequence[str] = DEFAULT_PATTERN, separator: str = "---"):
        self.language = language
        self.pattern = tuple(pattern)
        self.separator = colored_line(separator)

    def _expand(self, token: str, item: CustomItem) -> list[str]:
        """Lines for a single non-separator token."""
        caption = self.language.get_caption

        if token == UNBREAKABLE:
            return [caption("item.unbreakable")] if item.unbreakable else []
        if token == DROP:
            return [caption("item.nodrop")] if not item.drop else []
        if token == LEVEL:
            return [caption("item.level", item.level)] if item.level is not None else []
        if token == CLASS:
            return [caption("item.class", item.classes_string)] if item.classes is not None else []
        if token == LORE:
            return list(item.lore) if item.lore is not None else []
        if token == SKILLS:
            lines = []
            if item.has_left_click_caption:
                lines.append(caption("item.left-click", item.left_click_caption))
            if item.has_right_click_caption:
                lines.append(caption("item.right-click", item.right_click_caption))
            return lines
        if token == STATS:
            if item.stats_hidden:
                return [caption("item.hide")]
            return [
                caption("stat." + stat.type.value.lower(), stat.string_value)
                for stat in item.stats
            ]

        return [colored_line(token)]

    def render(self, item: CustomItem) -> list[str]:
        """
        Build the lore lines of an item.

        Separators never repeat and never open or close the result.
        An empty list is a valid result.
        """
        lore: list[str] = []
        last_is_separator = False

        for token in self.pattern:
            if token == SEPARATOR:
                if not last_is_separator:
                    lore.append(self.separator)
                    last_is_separator = True
                continue

            lines = self._expand(token, item)
            if lines:
                lore.extend(lines)
                last_is_separator = False

        if lore and lore[-1] == self.separator:
            lore.pop()
        if lore and lore[0] == self.separator:
            lore.pop(0)

        return lore
