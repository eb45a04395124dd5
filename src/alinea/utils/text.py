"""Text processing utilities for Alinea.

Example:
    >>> from alinea.utils.text import collapse_whitespace
    >>> collapse_whitespace("  Hello \\n  World ")
    'Hello World'
"""

from __future__ import annotations

import re
import textwrap

_WHITESPACE_RUN = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    """Collapse every whitespace run to one space and strip both ends.

    Args:
        text: Character data from a text node

    Returns:
        Single-line text (never contains a newline)

    Examples:
        >>> collapse_whitespace("a\\n\\n   b\\tc")
        'a b c'
        >>> collapse_whitespace("   ")
        ''
    """
    if not text:
        return ""
    return _WHITESPACE_RUN.sub(" ", text).strip()


def verbatim_lines(text: str) -> list[str]:
    """Split verbatim content into dedented lines.

    Leading and trailing blank lines are dropped, common indentation is
    removed and trailing whitespace on each line is stripped. Used for
    comments and raw-text elements, whose line structure is kept.

    Args:
        text: Raw content (may contain any line endings)

    Returns:
        List of lines without line terminators

    Examples:
        >>> verbatim_lines("\\n    a\\n      b\\n")
        ['a', '  b']
        >>> verbatim_lines("x")
        ['x']
    """
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    lines = [line.rstrip() for line in textwrap.dedent(normalized).split("\n")]
    while lines and not lines[0]:
        lines.pop(0)
    while lines and not lines[-1]:
        lines.pop()
    return lines
