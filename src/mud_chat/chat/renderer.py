"""Plain and legacy rendering of translatable components.

Both modes share a single traversal:

1. Look the component's translation key up in its locale dictionary.
2. On a miss, render the raw key.  Missing translations degrade to the key
   and are never raised.
3. On a hit, scan the template and emit each segment: literal text as-is,
   ``%%`` as ``%``, substitution placeholders as the resolved argument
   rendered recursively *in the same mode*, unknown conversions as nothing.
4. Append the component's extra components, again in the same mode.

Legacy mode additionally re-asserts the component's own style before every
text run it emits (the raw key, each literal, each ``%``).  Legacy text has
no nesting, so an argument that switches to e.g. bold red would otherwise
leak its style into the text that follows it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mud_chat.chat.resolver import ArgumentResolver
from mud_chat.chat.style import emit_style_codes
from mud_chat.chat.template import FormatKind, Literal, parse_template

if TYPE_CHECKING:
    from mud_chat.chat.translatable import TranslatableComponent

logger = logging.getLogger(__name__)


def render_plain(node: TranslatableComponent) -> str:
    """Render *node* and its extras without styling.

    Raises:
        ArgumentIndexOutOfRange: If the template references an argument
            that *node* does not have.
    """
    out: list[str] = []
    node._append_plain(out)
    return "".join(out)


def render_legacy(node: TranslatableComponent) -> str:
    """Render *node* and its extras as legacy text with inline ``§`` markers.

    Raises:
        ArgumentIndexOutOfRange: If the template references an argument
            that *node* does not have.
    """
    out: list[str] = []
    node._append_legacy(out)
    return "".join(out)


def append_translation(node: TranslatableComponent, out: list[str], *, legacy: bool) -> None:
    """Render *node*'s translated text (steps 1-3, not the extras) onto *out*."""
    dictionary = node.resolve_dictionary()
    key = node.translation_key
    # The node's style cannot change mid-render, so resolve it once.
    style_codes = emit_style_codes(node.effective_style()) if legacy else ""

    template = dictionary.lookup(key)
    if template is None:
        logger.debug("No translation for key %r; rendering the raw key", key)
        out.append(style_codes)
        out.append(key)
        return

    resolver = ArgumentResolver(node.arguments, translation_key=key, template=template)
    for segment in parse_template(template):
        if isinstance(segment, Literal):
            out.append(style_codes)
            out.append(segment.text)
        elif segment.kind is FormatKind.PERCENT:
            out.append(style_codes)
            out.append("%")
        elif segment.kind.takes_argument:
            argument = resolver.resolve(segment)
            if legacy:
                argument._append_legacy(out)
            else:
                argument._append_plain(out)
        else:
            logger.debug(
                "Dropping unsupported conversion %r in template for key %r", segment.source, key
            )
