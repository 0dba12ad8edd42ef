"""Caption lookup used for every player-facing line."""

import logging
from collections.abc import Mapping
from typing import Optional

from ..data.loaders import load_captions
from ..text import colored_line


logger = logging.getLogger(__name__)


class Language:
    """
    Caption table keyed by dotted names such as ``item.level``.

    Captions are ``str.format`` templates with positional fields.
    """

    def __init__(self, captions: Optional[Mapping[str, str]] = None):
        self._captions = dict(captions) if captions is not None else load_captions()

    def get_caption(self, key: str, *args) -> str:
        template = self._captions.get(key)
        if template is None:
            logger.debug("Missing caption: %s", key)
            return key
        return colored_line(template.format(*args) if args else template)

    def has_caption(self, key: str) -> bool:
        return key in self._captions
