"""Chat component tree.

A chat message is a tree of components.  Each component carries six
optional style attributes and a list of *extra* components rendered after
its own content.  Unset style attributes inherit from the parent, so the
parent link is needed at render time, but it is only a back-reference:
ownership runs downward through the child lists, and the parent itself is
held through a :mod:`weakref`.

Ownership rules
---------------
- A component belongs to at most one owner.  Attaching it elsewhere removes
  it from its previous owner's child list first.
- Attaching a component to itself or to one of its descendants raises
  :class:`~mud_chat.chat.errors.ComponentCycleError` (unless
  ``components.check_cycles`` is switched off in configuration).

Rendering
---------
``to_plain_text()`` drops all styling.  ``to_legacy_text()`` produces a flat
string in which every text run is preceded by the ``§`` markers of the
component's effective style.  Subclasses render their own content into a
list buffer and then call the base implementation to append their extras.
"""

from __future__ import annotations

import weakref
from collections.abc import Iterable

from mud_chat.chat.colors import ChatColor
from mud_chat.chat.errors import ComponentCycleError
from mud_chat.chat.style import FORMAT_ATTRIBUTES, StyleState, effective_style, emit_style_codes
from mud_chat.config import config


class BaseComponent:
    """Shared base of every chat component.

    Attributes:
        color:         Text color, ``None`` to inherit.
        bold:          ``True``/``False``, or ``None`` to inherit.
        italic:        As above.
        underlined:    As above.
        strikethrough: As above.
        obfuscated:    As above.
    """

    def __init__(
        self,
        *,
        color: ChatColor | None = None,
        bold: bool | None = None,
        italic: bool | None = None,
        underlined: bool | None = None,
        strikethrough: bool | None = None,
        obfuscated: bool | None = None,
    ) -> None:
        self.color = color
        self.bold = bold
        self.italic = italic
        self.underlined = underlined
        self.strikethrough = strikethrough
        self.obfuscated = obfuscated
        self._parent_ref: weakref.ReferenceType[BaseComponent] | None = None
        self._extra: list[BaseComponent] = []

    # ── Tree structure ───────────────────────────────────────────────────────

    @property
    def parent(self) -> BaseComponent | None:
        """Owning component, or ``None`` for a root (or a collected owner)."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def extra(self) -> list[BaseComponent]:
        """Components rendered after this component's own content."""
        return self._extra

    @extra.setter
    def extra(self, components: Iterable[BaseComponent]) -> None:
        self.set_extra(components)

    def set_extra(self, components: Iterable[BaseComponent]) -> None:
        """Replace the extra components, taking ownership of each."""
        new_extra = self._adopt_all(components)
        self._release_replaced(self._extra, new_extra)
        self._extra = new_extra

    def add_extra(self, value: str | BaseComponent) -> None:
        """Append one extra component; a string becomes a :class:`TextComponent`."""
        component = as_component(value)
        self._adopt_all([component])
        self._extra.append(component)

    def _child_lists(self) -> list[list[BaseComponent]]:
        """Every list through which this component owns children."""
        return [self._extra]

    def _check_attachable(self, child: BaseComponent) -> None:
        ancestor: BaseComponent | None = self
        while ancestor is not None:
            if ancestor is child:
                raise ComponentCycleError(
                    f"cannot attach {type(child).__name__} beneath itself or one of its descendants"
                )
            ancestor = ancestor.parent

    def _adopt_all(self, components: Iterable[BaseComponent]) -> list[BaseComponent]:
        """Take ownership of *components*, detaching each from its previous owner.

        Every component is checked before any is moved, so a rejected
        attachment leaves the tree untouched.
        """
        adopted = list(components)
        if config.components.check_cycles:
            for child in adopted:
                self._check_attachable(child)
        for child in adopted:
            previous = child.parent
            if previous is not None:
                previous._remove_child(child)
            child._parent_ref = weakref.ref(self)
        return adopted

    def _remove_child(self, child: BaseComponent) -> None:
        for children in self._child_lists():
            children[:] = [c for c in children if c is not child]

    def _release_replaced(self, old: list[BaseComponent], new: list[BaseComponent]) -> None:
        """Clear the parent link of children in *old* that this component no longer owns."""
        still_owned = {id(c) for c in new}
        for children in self._child_lists():
            if children is not old:
                still_owned.update(id(c) for c in children)
        for child in old:
            if id(child) not in still_owned and child.parent is self:
                child._parent_ref = None

    # ── Style ────────────────────────────────────────────────────────────────

    def effective_style(self) -> StyleState:
        """Style after inheriting unset attributes from the ancestors."""
        return effective_style(self)

    def copy_formatting(self, other: BaseComponent) -> None:
        """Copy *other*'s own (not inherited) style attributes onto this component."""
        self.color = other.color
        for name in FORMAT_ATTRIBUTES:
            setattr(self, name, getattr(other, name))

    def has_formatting(self) -> bool:
        """``True`` if any style attribute is set on this component itself."""
        return self.color is not None or any(
            getattr(self, name) is not None for name in FORMAT_ATTRIBUTES
        )

    # ── Rendering ────────────────────────────────────────────────────────────

    def to_plain_text(self) -> str:
        """Render without any styling."""
        out: list[str] = []
        self._append_plain(out)
        return "".join(out)

    def to_legacy_text(self) -> str:
        """Render as legacy text with inline ``§`` style markers."""
        out: list[str] = []
        self._append_legacy(out)
        return "".join(out)

    def _append_plain(self, out: list[str]) -> None:
        for component in self._extra:
            component._append_plain(out)

    def _append_legacy(self, out: list[str]) -> None:
        for component in self._extra:
            component._append_legacy(out)

    # ── Copying / repr ───────────────────────────────────────────────────────

    def duplicate(self) -> BaseComponent:
        """Deep copy of this component and everything it owns, detached from any parent."""
        copy = BaseComponent()
        self._duplicate_into(copy)
        return copy

    def _duplicate_into(self, copy: BaseComponent) -> None:
        copy.copy_formatting(self)
        copy.set_extra(component.duplicate() for component in self._extra)

    def _style_repr(self) -> str:
        fields = [f"color={self.color.name if self.color else None}"]
        fields.extend(f"{name}={getattr(self, name)}" for name in FORMAT_ATTRIBUTES)
        fields.append(f"extra={self._extra!r}")
        return ", ".join(fields)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._style_repr()})"


class TextComponent(BaseComponent):
    """A component holding literal text."""

    def __init__(self, text: str = "", **style) -> None:
        super().__init__(**style)
        self.text = text

    def _append_plain(self, out: list[str]) -> None:
        out.append(self.text)
        super()._append_plain(out)

    def _append_legacy(self, out: list[str]) -> None:
        out.append(emit_style_codes(self.effective_style()))
        out.append(self.text)
        super()._append_legacy(out)

    def duplicate(self) -> TextComponent:
        copy = TextComponent(self.text)
        self._duplicate_into(copy)
        return copy

    def __repr__(self) -> str:
        return f"TextComponent(text={self.text!r}, {self._style_repr()})"


def as_component(value: str | BaseComponent) -> BaseComponent:
    """Wrap a bare string in a :class:`TextComponent`; pass components through.

    Raises:
        TypeError: For any other value.
    """
    if isinstance(value, str):
        return TextComponent(value)
    if isinstance(value, BaseComponent):
        return value
    raise TypeError(f"expected str or BaseComponent, got {type(value).__name__}")


def to_plain_text(*components: BaseComponent) -> str:
    """Render several root components one after another, unstyled."""
    return "".join(component.to_plain_text() for component in components)


def to_legacy_text(*components: BaseComponent) -> str:
    """Render several root components one after another as legacy text."""
    return "".join(component.to_legacy_text() for component in components)
