"""Column-tracking output buffer for the layout renderer.

Appends to a list and joins once at the end: O(n) total vs O(n²) for
repeated string concatenation. On top of plain accumulation it tracks the
current output column and trims trailing spaces when a line is finished, so
indentation emitted before an empty line never leaves whitespace behind.

Thread Safety:
OutputBuffer instances are local to each print_doc() call.
No shared mutable state.

"""

from __future__ import annotations


class OutputBuffer:
    """Efficient string accumulator that knows its current column.

    Usage:
        >>> buf = OutputBuffer()
        >>> buf.append("<div")
        >>> buf.column
        4
        >>> buf.newline(2)
        >>> buf.append("id")
        >>> buf.build()
        '<div\\n  id'

    Thread Safety:
        Instance is local to each render call.
        No shared mutable state.

    """

    __slots__ = ("_parts", "_column")

    def __init__(self) -> None:
        """Initialize empty buffer at column 0."""
        self._parts: list[str] = []
        self._column = 0

    @property
    def column(self) -> int:
        """Column where the next character will land (0-indexed)."""
        return self._column

    def append(self, s: str) -> None:
        """Append text that contains no line break.

        Trailing spaces of appended text are not guaranteed to survive: a
        later newline() or build() strips them from the end of the line,
        whatever document they came from. Only newline(..., trim=False)
        keeps them.

        Args:
            s: String to append (empty strings are skipped)
        """
        if s:
            self._parts.append(s)
            self._column += len(s)

    def newline(self, indentation: int, *, trim: bool = True) -> None:
        """Finish the current line and indent the next one.

        Trailing spaces of the finished line are removed first unless trim
        is False.

        Args:
            indentation: Number of spaces to start the new line with
            trim: Strip trailing spaces of the finished line
        """
        if trim:
            self._trim_trailing_spaces()
        self._parts.append("\n")
        if indentation:
            self._parts.append(" " * indentation)
        self._column = indentation

    def _trim_trailing_spaces(self) -> None:
        while self._parts:
            last = self._parts[-1]
            stripped = last.rstrip(" ")
            if stripped:
                self._parts[-1] = stripped
                return
            self._parts.pop()

    def build(self) -> str:
        """Join all parts into the final string, trimming the last line too."""
        self._trim_trailing_spaces()
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        """Return True if any parts have been appended."""
        return bool(self._parts)
