"""Locale template scanner.

Locale templates use a small printf-like placeholder grammar::

    %s  %d        next sequential argument
    %2$s  %2$d    explicit argument, 1-based
    %%            a literal percent sign

:func:`parse_template` scans a template once, left to right, and yields
:class:`Literal` and :class:`Placeholder` segments lazily.  The recognised
shape is equivalent to the pattern ``%(?:(\\d+)\\$)?([A-Za-z%]|$)``:

- ``s`` / ``d`` are substitutions (``%d`` is *not* numerically formatted;
  the argument's own text is inserted either way).
- Any other letter (``%x``, ``%2$f``) is consumed as an
  :attr:`FormatKind.UNKNOWN` placeholder that renders nothing and takes no
  argument.
- A ``%`` at the very end of the template, or followed by anything that is
  not a letter or ``%`` (``100% sure``, ``%1x``), is ordinary text.

Every segment keeps the exact source text it was scanned from, so
:func:`reconstruct` always gives back the original template.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum


class FormatKind(Enum):
    """Conversion character of a placeholder."""

    STRING = "s"
    DECIMAL = "d"
    PERCENT = "%"
    UNKNOWN = "?"

    @property
    def takes_argument(self) -> bool:
        return self in (FormatKind.STRING, FormatKind.DECIMAL)


@dataclass(frozen=True)
class Literal:
    """A run of template text copied to the output as-is."""

    text: str

    @property
    def source(self) -> str:
        return self.text


@dataclass(frozen=True)
class Placeholder:
    """A ``%`` conversion in the template.

    Attributes:
        explicit_index: 1-based argument number from ``%n$``, or ``None``
                        for the next sequential argument.
        kind:           Conversion kind.
        source:         Exact template text of the conversion, e.g. ``"%2$s"``.
    """

    explicit_index: int | None
    kind: FormatKind
    source: str


Segment = Literal | Placeholder


def _classify(conversion: str) -> FormatKind:
    if conversion == "s":
        return FormatKind.STRING
    if conversion == "d":
        return FormatKind.DECIMAL
    if conversion == "%":
        return FormatKind.PERCENT
    return FormatKind.UNKNOWN


def _is_conversion_char(char: str) -> bool:
    return char == "%" or (char.isascii() and char.isalpha())


def parse_template(template: str) -> Iterator[Segment]:
    """Yield the segments of *template* in order.

    The generator is single-pass.  Scanning the same string again requires
    a fresh call, which is always safe because scanning has no side effects.
    Adjacent placeholders are yielded back to back with no empty literal in
    between, and an empty template yields nothing.
    """
    length = len(template)
    literal_start = 0
    pos = 0

    while pos < length:
        if template[pos] != "%":
            pos += 1
            continue

        # Optional "<digits>$" explicit index.
        cursor = pos + 1
        while cursor < length and template[cursor].isdigit() and template[cursor].isascii():
            cursor += 1
        explicit_index: int | None = None
        conversion_at = pos + 1
        if cursor > pos + 1 and cursor < length and template[cursor] == "$":
            explicit_index = int(template[pos + 1 : cursor])
            conversion_at = cursor + 1

        if conversion_at >= length:
            # "%" or "%n$" at the end of the template: plain text.
            break
        if not _is_conversion_char(template[conversion_at]):
            # Not a placeholder; the "%" stays part of the literal run.
            pos += 1
            continue

        if pos > literal_start:
            yield Literal(template[literal_start:pos])
        end = conversion_at + 1
        yield Placeholder(
            explicit_index=explicit_index,
            kind=_classify(template[conversion_at]),
            source=template[pos:end],
        )
        pos = literal_start = end

    if literal_start < length:
        yield Literal(template[literal_start:])


def reconstruct(segments: Iterable[Segment]) -> str:
    """Join the source text of *segments* back into a template string."""
    return "".join(segment.source for segment in segments)
