"""Layout renderer: turns a layout document into text.

The renderer walks the document with an explicit work stack of frames. Each
frame carries the indentation in effect (the sum of enclosing Indent widths),
the break mode of the nearest enclosing Group, and the document to print.
Pushing and popping frames is the indentation stack.

Group decisions:
    When a Group is reached, its child is measured in flat mode starting at
    the current column, followed by whatever comes after the group up to the
    next line break. If that fits within print_width the group renders flat,
    otherwise broken. A HardLine or LiteralLine inside the group's own
    content forces the broken mode, since the content can never sit on one
    line. The decision is made once and held for the group's whole subtree;
    nested groups make their own decisions.

Thread Safety:
All state lives in locals of print_doc(). Concurrent calls are independent.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from alinea.doc import Concat, Doc, Group, HardLine, Indent, Line, LiteralLine, SoftLine, Text
from alinea.stringbuilder import OutputBuffer
from alinea.utils.logger import get_logger

logger = get_logger(__name__)


class Mode(Enum):
    """Break mode of the nearest enclosing group."""

    FLAT = auto()
    BREAK = auto()


@dataclass(frozen=True, slots=True)
class _Frame:
    indentation: int
    mode: Mode
    doc: Doc


def print_doc(doc: Doc, print_width: int = 80) -> str:
    """Render a layout document to a string.

    Args:
        doc: Layout document to render
        print_width: Maximum line length consulted by Group fit checks

    Returns:
        Rendered text (no trailing newline is added)

    Raises:
        ValueError: If print_width is not positive

    Example:
        >>> from alinea.doc import concat, group, line, text
        >>> print_doc(group(concat(text("a"), line, text("b"))), print_width=2)
        'a\\nb'
    """
    if print_width < 1:
        raise ValueError(f"print_width must be positive, got {print_width}")

    out = OutputBuffer()
    stack: list[_Frame] = [_Frame(0, Mode.BREAK, doc)]
    flat_groups = 0
    broken_groups = 0

    while stack:
        frame = stack.pop()
        current = frame.doc

        match current:
            case Text(value=value):
                out.append(value)
            case Concat(parts=parts):
                for part in reversed(parts):
                    stack.append(_Frame(frame.indentation, frame.mode, part))
            case HardLine():
                out.newline(frame.indentation)
            case LiteralLine():
                out.newline(0, trim=False)
            case SoftLine():
                if frame.mode is Mode.BREAK:
                    out.newline(frame.indentation)
            case Line():
                if frame.mode is Mode.BREAK:
                    out.newline(frame.indentation)
                else:
                    out.append(" ")
            case Indent(child=child, width=width):
                stack.append(_Frame(frame.indentation + width, frame.mode, child))
            case Group(child=child):
                if _fits(child, stack, print_width - out.column):
                    flat_groups += 1
                    stack.append(_Frame(frame.indentation, Mode.FLAT, child))
                else:
                    broken_groups += 1
                    stack.append(_Frame(frame.indentation, Mode.BREAK, child))
            case _:
                raise TypeError(f"Not a layout document: {current!r}")

    logger.debug(
        "Printed document: %d flat groups, %d broken groups", flat_groups, broken_groups
    )
    return out.build()


def _fits(child: Doc, rest: list[_Frame], remaining: int) -> bool:
    """Check whether `child` printed flat, plus the rest of its line, fits.

    Args:
        child: Content of the group being decided
        rest: Pending frames of the main loop (top of stack is last)
        remaining: Columns left on the current line

    Returns:
        True if the group can render flat
    """
    if remaining < 0:
        return False

    # (doc, mode, belongs_to_group)
    probe: list[tuple[Doc, Mode, bool]] = [(child, Mode.FLAT, True)]
    rest_index = len(rest)

    while True:
        if not probe:
            if rest_index == 0:
                return True
            rest_index -= 1
            pending = rest[rest_index]
            probe.append((pending.doc, pending.mode, False))
            continue

        current, mode, own = probe.pop()
        match current:
            case Text(value=value):
                remaining -= len(value)
                if remaining < 0:
                    return False
            case Concat(parts=parts):
                for part in reversed(parts):
                    probe.append((part, mode, own))
            case HardLine() | LiteralLine():
                return not own
            case SoftLine():
                if mode is Mode.BREAK:
                    return True
            case Line():
                if mode is Mode.BREAK:
                    return True
                remaining -= 1
                if remaining < 0:
                    return False
            case Indent(child=inner):
                probe.append((inner, mode, own))
            case Group(child=inner):
                # Groups inside the measured content are measured flat too.
                probe.append((inner, Mode.FLAT if own else mode, own))
            case _:
                raise TypeError(f"Not a layout document: {current!r}")


__all__ = ["Mode", "print_doc"]
