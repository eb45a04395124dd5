"""Tree builder producing a typed markup tree.

Consumes the Lexer's token stream and builds immutable Element/Text/Comment/
Doctype nodes under a single Fragment root.

Rules:
- Tag name case is preserved; end tags match start tags case-insensitively.
- Void elements (img, br, ...) and `/>` tags never take children and are
  marked self_closing.
- An end tag closes the nearest matching open element; anything opened
  after it is closed implicitly.
- Elements still open at end of input are closed implicitly.
- An end tag with no matching open element is a ParseError.
- Text is kept verbatim, whitespace-only runs included; the layout decides
  what whitespace between tags means.

Thread Safety:
Parser instances are single-use. The resulting tree is immutable.

"""

from __future__ import annotations

from dataclasses import dataclass, field

from alinea.errors import ParseError
from alinea.lexer import VOID_ELEMENTS, Lexer
from alinea.location import SourceLocation
from alinea.nodes import Comment, Doctype, Element, Fragment, Node, Text
from alinea.tokens import Token, TokenType
from alinea.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(slots=True)
class _OpenElement:
    """An element whose end tag has not been seen yet."""

    token: Token
    children: list[Node] = field(default_factory=list)

    def close(self) -> Element:
        return Element(
            location=self.token.location,
            tag_name=self.token.value,
            attributes=self.token.attributes,
            children=tuple(self.children),
            self_closing=False,
        )


class Parser:
    """Markup parser.

    Usage:
        >>> parser = Parser('<div id="a"><br></div>')
        >>> tree = parser.parse()
        >>> tree.children[0].tag_name
        'div'

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation.

    """

    __slots__ = ("_source", "_source_file", "_stack", "_root")

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize parser with source text.

        Args:
            source: Markup source text
            source_file: Optional source file path for error messages
        """
        self._source = source
        self._source_file = source_file
        self._stack: list[_OpenElement] = []
        self._root: list[Node] = []

    def parse(self) -> Fragment:
        """Parse the source into a Fragment.

        Returns:
            Fragment root node

        Raises:
            ParseError: On stray end tags or unterminated constructs
        """
        for token in Lexer(self._source, self._source_file).tokenize():
            match token.type:
                case TokenType.START_TAG:
                    self._start_tag(token)
                case TokenType.END_TAG:
                    self._end_tag(token)
                case TokenType.TEXT:
                    self._append(Text(location=token.location, content=token.value))
                case TokenType.COMMENT:
                    self._append(Comment(location=token.location, content=token.value))
                case TokenType.DOCTYPE:
                    self._append(Doctype(location=token.location, content=token.value))
                case TokenType.EOF:
                    if self._stack:
                        logger.debug(
                            "Implicitly closing %d element(s) at end of input",
                            len(self._stack),
                        )
                    self._close_down_to(0)

        return Fragment(
            location=SourceLocation(
                lineno=1,
                col_offset=1,
                offset=0,
                end_offset=len(self._source),
                source_file=self._source_file,
            ),
            children=tuple(self._root),
        )

    def _append(self, node: Node) -> None:
        if self._stack:
            self._stack[-1].children.append(node)
        else:
            self._root.append(node)

    def _start_tag(self, token: Token) -> None:
        if token.self_closing or token.value.lower() in VOID_ELEMENTS:
            self._append(
                Element(
                    location=token.location,
                    tag_name=token.value,
                    attributes=token.attributes,
                    self_closing=True,
                )
            )
            return
        self._stack.append(_OpenElement(token))

    def _end_tag(self, token: Token) -> None:
        name = token.value.lower()
        for depth in range(len(self._stack) - 1, -1, -1):
            if self._stack[depth].token.value.lower() == name:
                if depth != len(self._stack) - 1:
                    logger.debug(
                        "</%s> at %s implicitly closes %d element(s)",
                        token.value,
                        token.location,
                        len(self._stack) - 1 - depth,
                    )
                self._close_down_to(depth)
                return

        if name in VOID_ELEMENTS:
            # </br> and friends: nothing to close
            return
        raise ParseError(
            f"Unexpected closing tag </{token.value}>",
            token.lineno,
            token.col,
            self._source_file,
        )

    def _close_down_to(self, depth: int) -> None:
        """Close every open element at stack index >= depth."""
        while len(self._stack) > depth:
            element = self._stack.pop().close()
            self._append(element)


__all__ = ["Parser"]
