"""Typed exceptions for the chat component package.

Design intent:
    - A dictionary miss is *not* an error.  It renders the raw translation
      key and is never raised.
    - A template referencing an argument that was not supplied is a
      mismatch between trusted locale content and the caller's arguments.
      It raises :class:`ArgumentIndexOutOfRange` and propagates out of the
      render call unchanged.
    - Placeholders outside the supported grammar are never errors.  An
      unknown conversion such as ``%x`` renders nothing, and a ``%`` that
      does not start a conversion stays literal text.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class TemplateContext:
    """Where a template failure happened.

    Attributes:
        translation_key: Key the template was looked up under.
        template: The template string being rendered.
    """

    translation_key: str
    template: str


class ChatComponentError(RuntimeError):
    """Base exception for chat component failures."""


class TemplateError(ChatComponentError):
    """Base exception for failures while rendering a locale template.

    Args:
        message: Human-readable description.
        context: The key/template pair being rendered.
    """

    def __init__(self, message: str, *, context: TemplateContext) -> None:
        super().__init__(
            f"{message} (key={context.translation_key!r}, template={context.template!r})"
        )
        self.context = context


class ArgumentIndexOutOfRange(TemplateError):
    """A placeholder resolved to an argument position that does not exist.

    Attributes:
        index: Zero-based argument position the placeholder resolved to
            (``-1`` for an explicit ``%0$s``).
        argument_count: Number of arguments the component carries.
    """

    def __init__(self, *, index: int, argument_count: int, context: TemplateContext) -> None:
        super().__init__(
            f"placeholder refers to argument {index + 1} but only "
            f"{argument_count} argument(s) were supplied",
            context=context,
        )
        self.index = index
        self.argument_count = argument_count


class ComponentCycleError(ChatComponentError):
    """Attaching a component would make it its own ancestor."""
