"""Terminal colour names and colour-pair numbering."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """The eight basic terminal colours, plus a marker for unknown names."""

    UNKNOWN = -1
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7


_BY_NAME = {c.name.lower(): c for c in Color if c is not Color.UNKNOWN}


def color_from_name(name: str) -> Color:
    """Map a colour name such as ``"red"`` to a Color; UNKNOWN if unrecognised."""
    return _BY_NAME.get(name, Color.UNKNOWN)


def color_pair(foreground: Color, background: Color) -> int:
    """Return the pair number reserved for a foreground/background combination."""
    for c in (foreground, background):
        if c is Color.UNKNOWN or c not in _BY_NAME.values():
            raise ValueError(f"no colour pair for {c!r}")
    return (int(foreground) + 1) * 100 + (int(background) + 1)