"""Effective style resolution and legacy style codes.

Every component carries six style attributes, each *unset* (``None``) by
default.  An unset attribute inherits from the component's parent, and so
on up to the root, where anything still unset resolves to "no color" /
``False``.  :class:`StyleState` is the frozen, fully-resolved snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mud_chat.chat.colors import ChatColor

if TYPE_CHECKING:
    from mud_chat.chat.components import BaseComponent

#: Attribute names in legacy emission order (after color).
FORMAT_ATTRIBUTES: tuple[str, ...] = (
    "bold",
    "italic",
    "underlined",
    "strikethrough",
    "obfuscated",
)

_FORMAT_MARKERS: dict[str, ChatColor] = {
    "bold": ChatColor.BOLD,
    "italic": ChatColor.ITALIC,
    "underlined": ChatColor.UNDERLINE,
    "strikethrough": ChatColor.STRIKETHROUGH,
    "obfuscated": ChatColor.MAGIC,
}


@dataclass(frozen=True)
class StyleState:
    """Resolved style of one component.

    Attributes:
        color:         Text color, or ``None`` when no ancestor sets one.
        bold:          Bold text.
        italic:        Italic text.
        underlined:    Underlined text.
        strikethrough: Struck-through text.
        obfuscated:    Obfuscated ("magic") text.
    """

    color: ChatColor | None = None
    bold: bool = False
    italic: bool = False
    underlined: bool = False
    strikethrough: bool = False
    obfuscated: bool = False


def effective_style(node: BaseComponent) -> StyleState:
    """Resolve *node*'s style by inheriting unset attributes from ancestors.

    The walk stops early once every attribute has been resolved.
    """
    color: ChatColor | None = None
    flags: dict[str, bool | None] = dict.fromkeys(FORMAT_ATTRIBUTES)

    current: BaseComponent | None = node
    while current is not None:
        if color is None:
            color = current.color
        for name, value in flags.items():
            if value is None:
                flags[name] = getattr(current, name)
        if color is not None and all(v is not None for v in flags.values()):
            break
        current = current.parent

    return StyleState(color=color, **{name: bool(value) for name, value in flags.items()})


def emit_style_codes(style: StyleState) -> str:
    """Return the legacy markers that re-assert *style* before a text run.

    The color slot always comes first: the color marker, or a reset marker
    when no color is set, so that a preceding styled run never leaks into
    this one.  The formatting markers follow in :data:`FORMAT_ATTRIBUTES`
    order for each attribute that is on.
    """
    parts: list[str] = [str(style.color if style.color is not None else ChatColor.RESET)]
    for name in FORMAT_ATTRIBUTES:
        if getattr(style, name):
            parts.append(str(_FORMAT_MARKERS[name]))
    return "".join(parts)
