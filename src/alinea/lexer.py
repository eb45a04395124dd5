"""Single-pass markup lexer.

Scans HTML-like source into START_TAG, END_TAG, TEXT, COMMENT, DOCTYPE and
EOF tokens. Position only ever moves forward, so scanning is O(n).

Attribute values may be double-quoted, single-quoted, unquoted, or
brace-delimited expressions (`onClick={() => go("x")}`), the last with
balanced braces and quoted strings respected.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from alinea.errors import ParseError
from alinea.location import SourceLocation
from alinea.nodes import Attribute, AttributeKind
from alinea.tokens import Token, TokenType

# Elements whose content is not markup: scanned verbatim up to the end tag
RAW_TEXT_TAGS = frozenset({"script", "style", "pre", "textarea"})

# Elements that never have content or an end tag
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

_QUOTES = "\"'`"


class Lexer:
    """Markup lexer.

    Usage:
        >>> lexer = Lexer('<p class="x">Hi</p>')
        >>> for token in lexer.tokenize():
        ...     print(token)
        Token(START_TAG, 'p', 1:1)
        Token(TEXT, 'Hi', 1:14)
        Token(END_TAG, 'p', 1:16)
        Token(EOF, '', 1:20)

    Thread Safety:
        Lexer instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_pos",
        "_lineno",
        "_col",
        "_source_file",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Markup source text
            source_file: Optional source file path for error messages
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._source_file = source_file

    def tokenize(self) -> Iterator[Token]:
        """Tokenize the source.

        Yields:
            Tokens in source order, ending with EOF

        Raises:
            ParseError: On unterminated tags, comments or expressions
        """
        while self._pos < self._source_len:
            if self._source.startswith("<!--", self._pos):
                yield self._scan_comment()
            elif self._source.startswith("<!", self._pos):
                yield self._scan_doctype()
            elif self._starts_end_tag(self._pos):
                yield self._scan_end_tag()
            elif self._starts_start_tag(self._pos):
                token = self._scan_start_tag()
                yield token
                if token.value.lower() in RAW_TEXT_TAGS and not token.self_closing:
                    raw = self._scan_raw_text(token.value)
                    if raw is not None:
                        yield raw
            else:
                yield self._scan_text()

        yield Token(TokenType.EOF, "", self._location())

    # =========================================================================
    # Position helpers
    # =========================================================================

    def _location(self) -> SourceLocation:
        return SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._pos,
            source_file=self._source_file,
        )

    def _commit_to(self, new_pos: int) -> None:
        """Advance to new_pos, keeping line and column in step."""
        chunk = self._source[self._pos : new_pos]
        newlines = chunk.count("\n")
        if newlines:
            self._lineno += newlines
            self._col = len(chunk) - chunk.rfind("\n")
        else:
            self._col += len(chunk)
        self._pos = new_pos

    def _error(self, message: str, location: SourceLocation | None = None) -> ParseError:
        loc = location or self._location()
        return ParseError(message, loc.lineno, loc.col_offset, self._source_file)

    def _peek(self, offset: int = 0) -> str:
        pos = self._pos + offset
        return self._source[pos] if pos < self._source_len else ""

    def _skip_whitespace(self) -> None:
        pos = self._pos
        while pos < self._source_len and self._source[pos].isspace():
            pos += 1
        self._commit_to(pos)

    def _starts_start_tag(self, pos: int) -> bool:
        nxt = pos + 1
        return (
            self._source[pos] == "<"
            and nxt < self._source_len
            and self._source[nxt].isalpha()
        )

    def _starts_end_tag(self, pos: int) -> bool:
        nxt = pos + 2
        return (
            self._source.startswith("</", pos)
            and nxt < self._source_len
            and self._source[nxt].isalpha()
        )

    # =========================================================================
    # Scanners
    # =========================================================================

    def _scan_comment(self) -> Token:
        start = self._location()
        end = self._source.find("-->", self._pos + 4)
        if end == -1:
            raise self._error("Unterminated comment", start)
        content = self._source[self._pos + 4 : end]
        self._commit_to(end + 3)
        return Token(TokenType.COMMENT, content, start)

    def _scan_doctype(self) -> Token:
        start = self._location()
        end = self._source.find(">", self._pos + 2)
        if end == -1:
            raise self._error("Unterminated declaration", start)
        content = self._source[self._pos + 2 : end].strip()
        self._commit_to(end + 1)
        return Token(TokenType.DOCTYPE, content, start)

    def _scan_end_tag(self) -> Token:
        start = self._location()
        self._commit_to(self._pos + 2)
        name = self._scan_name()
        self._skip_whitespace()
        if self._peek() != ">":
            raise self._error(f"Expected '>' to close </{name}", start)
        self._commit_to(self._pos + 1)
        return Token(TokenType.END_TAG, name, start)

    def _scan_start_tag(self) -> Token:
        start = self._location()
        self._commit_to(self._pos + 1)
        name = self._scan_name()
        attributes: list[Attribute] = []

        while True:
            self._skip_whitespace()
            char = self._peek()
            if not char:
                raise self._error(f"Unterminated start tag <{name}", start)
            if char == ">":
                self._commit_to(self._pos + 1)
                return Token(TokenType.START_TAG, name, start, tuple(attributes), False)
            if char == "/" and self._peek(1) == ">":
                self._commit_to(self._pos + 2)
                return Token(TokenType.START_TAG, name, start, tuple(attributes), True)
            attributes.append(self._scan_attribute())

    def _scan_name(self) -> str:
        pos = self._pos
        source = self._source
        while pos < self._source_len:
            char = source[pos]
            if char.isspace() or char in "=>" or (char == "/" and source.startswith("/>", pos)):
                break
            pos += 1
        name = source[self._pos : pos]
        if not name:
            raise self._error(f"Unexpected character {self._peek()!r}")
        self._commit_to(pos)
        return name

    def _scan_attribute(self) -> Attribute:
        start = self._location()
        name = self._scan_name()
        self._skip_whitespace()
        if self._peek() != "=":
            return Attribute(name, None, AttributeKind.BOOLEAN, start)

        self._commit_to(self._pos + 1)
        self._skip_whitespace()
        char = self._peek()
        if char in ("\"", "'"):
            end = self._source.find(char, self._pos + 1)
            if end == -1:
                raise self._error(f"Unterminated value for attribute '{name}'", start)
            value = self._source[self._pos + 1 : end]
            self._commit_to(end + 1)
            return Attribute(name, value, AttributeKind.QUOTED, start)
        if char == "{":
            end = self._find_expression_end(start)
            value = self._source[self._pos + 1 : end]
            self._commit_to(end + 1)
            return Attribute(name, value, AttributeKind.EXPRESSION, start)

        pos = self._pos
        source = self._source
        while pos < self._source_len:
            c = source[pos]
            if c.isspace() or c == ">" or source.startswith("/>", pos):
                break
            pos += 1
        if pos == self._pos:
            raise self._error(f"Missing value for attribute '{name}'", start)
        value = source[self._pos : pos]
        self._commit_to(pos)
        return Attribute(name, value, AttributeKind.QUOTED, start)

    def _find_expression_end(self, start: SourceLocation) -> int:
        """Find the brace closing the expression that opens at the current position."""
        source = self._source
        depth = 0
        pos = self._pos
        quote = ""
        while pos < self._source_len:
            char = source[pos]
            if quote:
                if char == "\\":
                    pos += 2
                    continue
                if char == quote:
                    quote = ""
            elif char in _QUOTES:
                quote = char
            elif char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth == 0:
                    return pos
            pos += 1
        raise self._error("Unterminated expression attribute", start)

    def _scan_raw_text(self, tag_name: str) -> Token | None:
        """Scan verbatim content up to the end tag of a raw-text element."""
        start = self._location()
        closing = f"</{tag_name.lower()}"
        end = self._source.lower().find(closing, self._pos)
        if end == -1:
            end = self._source_len
        content = self._source[self._pos : end]
        self._commit_to(end)
        if not content:
            return None
        return Token(TokenType.TEXT, content, start)

    def _scan_text(self) -> Token:
        start = self._location()
        pos = self._pos + 1
        source = self._source
        while pos < self._source_len:
            pos = source.find("<", pos)
            if pos == -1:
                pos = self._source_len
                break
            if (
                source.startswith("<!", pos)
                or self._starts_end_tag(pos)
                or self._starts_start_tag(pos)
            ):
                break
            pos += 1
        content = source[self._pos : pos]
        self._commit_to(pos)
        return Token(TokenType.TEXT, content, start)


__all__ = ["RAW_TEXT_TAGS", "VOID_ELEMENTS", "Lexer"]
