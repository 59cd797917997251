"""Legacy chat marker alphabet.

Legacy text encodes style inline: every marker is the section sign ``§``
followed by a single code character.  Sixteen codes select a color, six
select a formatting attribute (or reset).

    §0-§9, §a-§f   colors (black … white)
    §k             obfuscated ("magic")
    §l             bold
    §m             strikethrough
    §n             underline
    §o             italic
    §r             reset

``str(ChatColor.RED)`` yields the two-character marker, so members can be
appended straight onto a legacy text buffer.
"""

from __future__ import annotations

import re
from enum import Enum

#: Character that introduces every legacy marker.
COLOR_CHAR = "§"

#: All recognised code characters, lowercase.
ALL_CODES = "0123456789abcdefklmnor"

_STRIP_COLOR_RE = re.compile(f"{COLOR_CHAR}[0-9A-FK-OR]", re.IGNORECASE)


class ChatColor(Enum):
    """One legacy marker: a color or a formatting code."""

    BLACK = "0"
    DARK_BLUE = "1"
    DARK_GREEN = "2"
    DARK_AQUA = "3"
    DARK_RED = "4"
    DARK_PURPLE = "5"
    GOLD = "6"
    GRAY = "7"
    DARK_GRAY = "8"
    BLUE = "9"
    GREEN = "a"
    AQUA = "b"
    RED = "c"
    LIGHT_PURPLE = "d"
    YELLOW = "e"
    WHITE = "f"
    MAGIC = "k"
    BOLD = "l"
    STRIKETHROUGH = "m"
    UNDERLINE = "n"
    ITALIC = "o"
    RESET = "r"

    @property
    def code(self) -> str:
        """The single code character following ``§``."""
        return self.value

    @property
    def is_format(self) -> bool:
        """``True`` for formatting codes (and reset), ``False`` for colors."""
        return self.value in "klmnor"

    def __str__(self) -> str:
        return f"{COLOR_CHAR}{self.value}"

    @classmethod
    def get_by_char(cls, code: str) -> ChatColor | None:
        """Look up a marker by its code character (case-insensitive).

        Returns ``None`` for characters outside the alphabet.
        """
        try:
            return cls(code.lower())
        except ValueError:
            return None

    @staticmethod
    def strip_color(text: str | None) -> str | None:
        """Remove every legacy marker from *text*."""
        if text is None:
            return None
        return _STRIP_COLOR_RE.sub("", text)

    @staticmethod
    def translate_alternate_color_codes(alt_char: str, text: str) -> str:
        """Rewrite markers written with *alt_char* (e.g. ``&c``) into ``§c``.

        Only occurrences followed by a valid code character are rewritten;
        a lone *alt_char* is left untouched.
        """
        chars = list(text)
        for i in range(len(chars) - 1):
            if chars[i] == alt_char and chars[i + 1].lower() in ALL_CODES:
                chars[i] = COLOR_CHAR
                chars[i + 1] = chars[i + 1].lower()
        return "".join(chars)
