"""Exception classes for Alinea.

Every error raised by Alinea itself derives from AlineaError. Failures raised
by a user-supplied leaf printer are never wrapped and reach the caller as-is.
"""

from __future__ import annotations


class AlineaError(Exception):
    """Base exception for all Alinea errors.

    Subclass this for specific error categories.
    """

    pass


class MalformedDocumentError(AlineaError):
    """Layout document built from invalid parts.

    Raised at construction time when a Text payload contains a line break or
    an Indent is given a negative width.
    """

    pass


class NodeShapeError(AlineaError):
    """Markup node that violates the tree contract.

    Raised for elements without a tag name and for node types the printer
    has no layout for. This is a programming error, not bad user input.
    """

    pass


class ParseError(AlineaError):
    """Error during markup parsing.

    Raised when the parser meets a stray end tag or unterminated construct.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class ConfigError(AlineaError):
    """Invalid formatting configuration value."""

    def __init__(self, option: str, message: str) -> None:
        """Initialize config error.

        Args:
            option: Name of the offending FormatConfig field
            message: Description of the problem
        """
        self.option = option
        super().__init__(f"Option '{option}': {message}")
