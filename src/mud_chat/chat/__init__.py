"""Chat component tree with translatable components.

Typical usage::

    from mud_chat.chat import ChatColor, TextComponent, TranslatableComponent

    joined = TranslatableComponent("multiplayer.player.joined", "Mira", color=ChatColor.YELLOW)
    joined.to_plain_text()   # "Mira joined the game"
    joined.to_legacy_text()  # "§eMira§e joined the game"
"""

from mud_chat.chat.colors import ChatColor
from mud_chat.chat.components import BaseComponent, TextComponent, to_legacy_text, to_plain_text
from mud_chat.chat.errors import (
    ArgumentIndexOutOfRange,
    ChatComponentError,
    ComponentCycleError,
    TemplateError,
)
from mud_chat.chat.style import StyleState
from mud_chat.chat.translatable import TranslatableComponent

__all__ = [
    "ArgumentIndexOutOfRange",
    "BaseComponent",
    "ChatColor",
    "ChatComponentError",
    "ComponentCycleError",
    "StyleState",
    "TemplateError",
    "TextComponent",
    "TranslatableComponent",
    "to_legacy_text",
    "to_plain_text",
]
