"""Placeholder → argument resolution.

One :class:`ArgumentResolver` is created per render call.  It owns the
*sequential cursor*: a zero-based counter that hands out arguments, in
order, to placeholders without an explicit ``%n$`` index.  Explicit
placeholders index straight into the argument list and leave the cursor
alone, so ``"%2$s %s %s"`` resolves to arguments 2, 1, 2.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from mud_chat.chat.errors import ArgumentIndexOutOfRange, TemplateContext
from mud_chat.chat.template import Placeholder

if TYPE_CHECKING:
    from mud_chat.chat.components import BaseComponent


class ArgumentResolver:
    """Maps substitution placeholders onto a component's arguments.

    Attributes:
        cursor: Index of the argument the next sequential placeholder takes.
    """

    def __init__(
        self,
        arguments: Sequence[BaseComponent],
        *,
        translation_key: str,
        template: str,
    ) -> None:
        self._arguments = arguments
        self._context = TemplateContext(translation_key=translation_key, template=template)
        self.cursor = 0

    def resolve(self, placeholder: Placeholder) -> BaseComponent:
        """Return the argument *placeholder* refers to.

        Only ``%s``/``%d`` placeholders should be passed in; ``%%`` and
        unknown conversions take no argument and must not move the cursor.

        Raises:
            ArgumentIndexOutOfRange: If the resolved position is negative
                (``%0$s``) or past the end of the argument list.
        """
        if placeholder.explicit_index is not None:
            index = placeholder.explicit_index - 1
        else:
            index = self.cursor
            self.cursor += 1

        if index < 0 or index >= len(self._arguments):
            raise ArgumentIndexOutOfRange(
                index=index,
                argument_count=len(self._arguments),
                context=self._context,
            )
        return self._arguments[index]
