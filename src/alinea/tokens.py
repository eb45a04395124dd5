"""Token and TokenType definitions for the markup lexer.

The lexer produces a stream of Token objects that the parser consumes.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from alinea.location import SourceLocation
from alinea.nodes import Attribute


class TokenType(Enum):
    """Token types produced by the lexer."""

    START_TAG = auto()  # <div id="a">, <img />
    END_TAG = auto()  # </div>
    TEXT = auto()  # character data
    COMMENT = auto()  # <!-- ... -->
    DOCTYPE = auto()  # <!DOCTYPE html>
    EOF = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type
        value: Tag name for tags, raw text for TEXT, inner content for
            COMMENT and DOCTYPE, empty for EOF
        location: Where the token starts
        attributes: Parsed attributes (START_TAG only)
        self_closing: Tag ended with `/>` (START_TAG only)

    """

    type: TokenType
    value: str
    location: SourceLocation
    attributes: tuple[Attribute, ...] = ()
    self_closing: bool = False

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self.location.lineno}:{self.location.col_offset})"

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self.location.lineno

    @property
    def col(self) -> int:
        """Column offset (convenience accessor)."""
        return self.location.col_offset


__all__ = ["Token", "TokenType"]
