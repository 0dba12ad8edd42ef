"""Chat color helpers."""

import re


COLOR_CHAR = "§"
_COLOR_CODE = re.compile(r"&([0-9a-fk-orA-FK-OR])")


def colored_line(line: str) -> str:
    """Translate ``&`` color codes to the server's color character."""
    return _COLOR_CODE.sub(lambda m: COLOR_CHAR + m.group(1).lower(), line)
