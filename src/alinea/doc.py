"""Layout document model.

A layout document describes what to print and where line breaks may occur,
independent of final column widths. The printer (alinea.printer) turns it
into text.

Variants:
- Text: literal characters, never containing a line break
- HardLine: unconditional line break
- LiteralLine: unconditional line break back to column 0, keeping trailing
  spaces of the finished line
- SoftLine: nothing when flat, a line break when broken
- Line: a space when flat, a line break when broken
- Indent: extra indentation for breaks inside its child
- Group: a single flat-or-broken decision
- Concat: sequential composition

All variants are frozen dataclasses, so documents can be shared freely and
reused as building blocks across threads.

Example:
    >>> from alinea.doc import concat, group, indent, line, text
    >>> doc = group(concat(text("<div"), indent(concat(line, text('id="a"')), 2), text(">")))

"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TypeAlias

from alinea.errors import MalformedDocumentError


@dataclass(frozen=True, slots=True)
class Text:
    """Literal characters with no embedded line break."""

    value: str

    def __post_init__(self) -> None:
        if "\n" in self.value or "\r" in self.value:
            raise MalformedDocumentError(
                f"Text payload contains a line break: {self.value!r}"
            )


@dataclass(frozen=True, slots=True)
class HardLine:
    """Unconditional line break.

    The next line starts at the active indentation.
    """


@dataclass(frozen=True, slots=True)
class LiteralLine:
    """Unconditional line break that ignores the active indentation.

    The next line starts at column 0 and the finished line keeps its trailing
    spaces. Used for verbatim content such as multi-line attribute values.
    """


@dataclass(frozen=True, slots=True)
class SoftLine:
    """Line break that disappears when the enclosing group is flat."""


@dataclass(frozen=True, slots=True)
class Line:
    """Line break that becomes a single space when the enclosing group is flat."""


@dataclass(frozen=True, slots=True)
class Indent:
    """Increase indentation by a fixed number of columns for breaks in child.

    Widths are plain column counts rather than multiples of a tab unit, which
    is what lets attribute alignment use arbitrary offsets.
    """

    child: Doc
    width: int

    def __post_init__(self) -> None:
        if self.width < 0:
            raise MalformedDocumentError(f"Indent width must be >= 0, got {self.width}")


@dataclass(frozen=True, slots=True)
class Group:
    """Unit of break decision: the child renders entirely flat or entirely broken.

    Nested groups decide independently of their parents.
    """

    child: Doc


@dataclass(frozen=True, slots=True)
class Concat:
    """Sequential composition of documents."""

    parts: tuple[Doc, ...] = ()


Doc: TypeAlias = Text | HardLine | LiteralLine | SoftLine | Line | Indent | Group | Concat


# =============================================================================
# Builders
# =============================================================================

hardline = HardLine()
literalline = LiteralLine()
softline = SoftLine()
line = Line()
EMPTY = Concat()


def text(s: str) -> Text:
    """Create a literal text document.

    Raises:
        MalformedDocumentError: If s contains a line break
    """
    return Text(s)


def spaces(count: int) -> Text:
    """Create a run of `count` literal spaces."""
    return Text(" " * count)


def concat(*docs: Doc | str) -> Doc:
    """Compose documents in sequence.

    Nested Concat parts are flattened and empty text is dropped. Plain strings
    are accepted as shorthand for Text. A single remaining part is returned
    as-is; no parts yield the empty Concat, which renders as nothing.

    Examples:
        >>> concat(text("a"), concat(text("b"), text("c")))
        Concat(parts=(Text(value='a'), Text(value='b'), Text(value='c')))
        >>> concat()
        Concat(parts=())
    """
    flat: list[Doc] = []
    for doc in docs:
        if isinstance(doc, str):
            doc = Text(doc)
        if isinstance(doc, Concat):
            flat.extend(doc.parts)
        elif isinstance(doc, Text) and not doc.value:
            continue
        else:
            flat.append(doc)
    if len(flat) == 1:
        return flat[0]
    return Concat(tuple(flat))


def join(separator: Doc, docs: Iterable[Doc]) -> Doc:
    """Interleave `separator` between `docs`.

    Example:
        >>> join(line, [text("a"), text("b")])
        Concat(parts=(Text(value='a'), Line(), Text(value='b')))
    """
    parts: list[Doc] = []
    for i, doc in enumerate(docs):
        if i:
            parts.append(separator)
        parts.append(doc)
    return concat(*parts)


def indent(doc: Doc, width: int) -> Doc:
    """Indent breaks inside `doc` by `width` columns.

    A zero width is a legal no-op.

    Raises:
        MalformedDocumentError: If width is negative
    """
    return Indent(doc, width)


def group(doc: Doc) -> Group:
    """Wrap `doc` as a single fit-or-break decision unit."""
    return Group(doc)


__all__ = [
    "EMPTY",
    "Concat",
    "Doc",
    "Group",
    "HardLine",
    "Indent",
    "Line",
    "LiteralLine",
    "SoftLine",
    "Text",
    "concat",
    "group",
    "hardline",
    "indent",
    "join",
    "line",
    "literalline",
    "softline",
    "spaces",
    "text",
]
