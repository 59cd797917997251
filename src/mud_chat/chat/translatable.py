"""Translatable chat component.

A :class:`TranslatableComponent` stores a translation key instead of text.
At render time the key is looked up in a locale dictionary and the
template's placeholders are filled with the component's *arguments*, which
are themselves components (bare strings are wrapped in
:class:`~mud_chat.chat.components.TextComponent`).  Arguments are owned by
the translatable component and inherit its style, so::

    TranslatableComponent("chat.type.text", "Mira", "Got any bread?", color=ChatColor.GRAY)

renders ``<Mira> Got any bread?`` in plain mode and the same text, gray,
in legacy mode.

Dictionary selection
--------------------
A component renders against its own ``dictionary`` when one was given,
otherwise against the nearest ancestor's, otherwise against the
process-wide default from :mod:`mud_chat.locale`.
"""

from __future__ import annotations

from collections.abc import Iterable

from mud_chat.chat.components import BaseComponent, as_component
from mud_chat.chat.renderer import append_translation, render_legacy, render_plain
from mud_chat.locale.dictionary import LocaleDictionary, get_default_dictionary


class TranslatableComponent(BaseComponent):
    """A component whose text comes from a locale template.

    Attributes:
        dictionary: Locale dictionary override for this component and its
                    descendants; ``None`` to inherit.
    """

    def __init__(
        self,
        translation_key: str,
        *values: str | BaseComponent,
        dictionary: LocaleDictionary | None = None,
        **style,
    ) -> None:
        """Create a component for *translation_key*.

        Args:
            translation_key: Key into the locale dictionary.
            *values:         Arguments for the template's placeholders, in
                             order.  Strings are wrapped in ``TextComponent``.
            dictionary:      Optional locale dictionary override.
            **style:         Style attributes (``color``, ``bold``, ...).
        """
        super().__init__(**style)
        self._translation_key = translation_key
        self.dictionary = dictionary
        self._arguments: list[BaseComponent] = []
        self.set_arguments([as_component(value) for value in values])

    # ── Key ──────────────────────────────────────────────────────────────────

    @property
    def translation_key(self) -> str:
        """Key looked up at render time.  Unknown or empty keys render as-is."""
        return self._translation_key

    @translation_key.setter
    def translation_key(self, key: str) -> None:
        self._translation_key = key

    # ── Arguments ────────────────────────────────────────────────────────────

    @property
    def arguments(self) -> list[BaseComponent]:
        """Components substituted into the template's placeholders."""
        return self._arguments

    @arguments.setter
    def arguments(self, components: Iterable[BaseComponent]) -> None:
        self.set_arguments(components)

    def set_arguments(self, components: Iterable[BaseComponent]) -> None:
        """Replace every argument, taking ownership of each new one.

        Previous arguments that are not in the new list are released (their
        parent link is cleared).
        """
        new_arguments = self._adopt_all(components)
        self._release_replaced(self._arguments, new_arguments)
        self._arguments = new_arguments

    def add_argument(self, value: str | BaseComponent) -> None:
        """Append one argument; a string becomes a ``TextComponent``.

        The argument inherits this component's formatting.
        """
        component = as_component(value)
        self._adopt_all([component])
        self._arguments.append(component)

    def _child_lists(self) -> list[list[BaseComponent]]:
        return [self._arguments, *super()._child_lists()]

    # ── Rendering ────────────────────────────────────────────────────────────

    def resolve_dictionary(self) -> LocaleDictionary:
        """Dictionary this component renders against (see module docstring)."""
        node: BaseComponent | None = self
        while node is not None:
            dictionary = getattr(node, "dictionary", None)
            if dictionary is not None:
                return dictionary
            node = node.parent
        return get_default_dictionary()

    def to_plain_text(self) -> str:
        return render_plain(self)

    def to_legacy_text(self) -> str:
        return render_legacy(self)

    def _append_plain(self, out: list[str]) -> None:
        append_translation(self, out, legacy=False)
        super()._append_plain(out)

    def _append_legacy(self, out: list[str]) -> None:
        append_translation(self, out, legacy=True)
        super()._append_legacy(out)

    # ── Copying / repr ───────────────────────────────────────────────────────

    def duplicate(self) -> TranslatableComponent:
        copy = TranslatableComponent(self._translation_key, dictionary=self.dictionary)
        copy.set_arguments(argument.duplicate() for argument in self._arguments)
        self._duplicate_into(copy)
        return copy

    def __repr__(self) -> str:
        return (
            f"TranslatableComponent(translation_key={self._translation_key!r}, "
            f"arguments={self._arguments!r}, {self._style_repr()})"
        )
