"""
Alinea: markup formatter with first-attribute alignment

Formats HTML-like markup through a small layout-document algebra (text, hard
and soft breaks, groups, indentation). Elements with more than one attribute
keep the first attribute on the tag line and align the rest beneath it:

    <div id="a"
         class="b"
         style="c"></div>

Quick Start:
    >>> from alinea import format_markup
    >>> print(format_markup('<img src="s" alt="a" />'), end="")
    <img src="s"
         alt="a" />

    >>> # Or keep a configured formatter around
    >>> from alinea import Formatter, FormatConfig
    >>> fmt = Formatter(FormatConfig(print_width=100))
    >>> out = fmt('<div id="x"></div>')

Working with trees:
    >>> from alinea import parse, build_doc, print_doc
    >>> tree = parse('<p class="a" id="b">Hi</p>')
    >>> doc = build_doc(tree)
    >>> text = print_doc(doc, print_width=80)

Installation:
    pip install alinea               # Core formatter (zero deps)
"""

from alinea.config import DEFAULT_CONFIG, BracketPlacement, FormatConfig
from alinea.doc import (
    Concat,
    Doc,
    Group,
    HardLine,
    Indent,
    Line,
    LiteralLine,
    SoftLine,
    concat,
    group,
    hardline,
    indent,
    join,
    line,
    literalline,
    softline,
    spaces,
    text,
)
from alinea.errors import (
    AlineaError,
    ConfigError,
    MalformedDocumentError,
    NodeShapeError,
    ParseError,
)
from alinea.layout import LeafPrinter, TreePrinter, print_leaf
from alinea.lexer import Lexer
from alinea.location import SourceLocation
from alinea.nodes import (
    Attribute,
    AttributeKind,
    Comment,
    Doctype,
    Element,
    Fragment,
    Node,
)
from alinea.parser import Parser
from alinea.printer import print_doc
from alinea.tokens import Token, TokenType

__version__ = "0.1.0"


def parse(source: str, *, source_file: str | None = None) -> Fragment:
    """Parse markup source into a tree.

    Args:
        source: Markup source text
        source_file: Optional source file path for error messages

    Returns:
        Fragment root node

    Raises:
        ParseError: On stray end tags or unterminated constructs

    Example:
        >>> tree = parse('<div id="a"></div>')
        >>> tree.children[0].tag_name
        'div'
    """
    return Parser(source, source_file=source_file).parse()


def build_doc(
    node: Node,
    config: FormatConfig | None = None,
    *,
    print_leaf: LeafPrinter | None = None,
) -> Doc:
    """Build the layout document for a tree without rendering it.

    Args:
        node: Root of the tree (usually a Fragment)
        config: Formatting configuration (defaults to FormatConfig())
        print_leaf: Optional leaf printer replacing the built-in one

    Returns:
        Layout document
    """
    return TreePrinter(config, print_leaf=print_leaf).print(node)


def format_tree(
    node: Node,
    config: FormatConfig | None = None,
    *,
    print_leaf: LeafPrinter | None = None,
) -> str:
    """Format a markup tree.

    Args:
        node: Root of the tree
        config: Formatting configuration (defaults to FormatConfig())
        print_leaf: Optional leaf printer replacing the built-in one.
            Its exceptions propagate unchanged.

    Returns:
        Formatted text
    """
    config = config or DEFAULT_CONFIG
    output = print_doc(build_doc(node, config, print_leaf=print_leaf), config.print_width)
    if output and config.trailing_newline:
        output += "\n"
    return output


def format_markup(
    source: str,
    config: FormatConfig | None = None,
    *,
    source_file: str | None = None,
) -> str:
    """Parse and format markup in one call.

    Args:
        source: Markup source text
        config: Formatting configuration (defaults to FormatConfig())
        source_file: Optional source file path for error messages

    Returns:
        Formatted text

    Example:
        >>> print(format_markup('<div id="a" class="b"></div>'), end="")
        <div id="a"
             class="b"></div>
    """
    return format_tree(parse(source, source_file=source_file), config)


class Formatter:
    """Markup formatter bound to one configuration.

    Usage:
        >>> fmt = Formatter(FormatConfig(align_attributes=False))
        >>> fmt('<div id="a" class="b"></div>')
        '<div id="a" class="b"></div>\\n'

    Thread Safety:
        Holds only immutable configuration. Safe to share across threads.

    """

    __slots__ = ("_config", "_printer")

    def __init__(
        self,
        config: FormatConfig | None = None,
        *,
        print_leaf: LeafPrinter | None = None,
    ) -> None:
        """Initialize formatter.

        Args:
            config: Formatting configuration (defaults to FormatConfig())
            print_leaf: Optional leaf printer replacing the built-in one
        """
        self._config = config or DEFAULT_CONFIG
        self._printer = TreePrinter(self._config, print_leaf=print_leaf)

    @property
    def config(self) -> FormatConfig:
        """Configuration this formatter was created with."""
        return self._config

    def __call__(self, source: str, *, source_file: str | None = None) -> str:
        """Parse and format markup source.

        Args:
            source: Markup source text
            source_file: Optional source file path for error messages

        Returns:
            Formatted text
        """
        return self.format_tree(parse(source, source_file=source_file))

    def format_tree(self, node: Node) -> str:
        """Format an already parsed tree."""
        output = print_doc(self._printer.print(node), self._config.print_width)
        if output and self._config.trailing_newline:
            output += "\n"
        return output


__all__ = [  # noqa: RUF022 - grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "parse",
    "build_doc",
    "format_tree",
    "format_markup",
    "Formatter",
    # Configuration
    "FormatConfig",
    "BracketPlacement",
    "DEFAULT_CONFIG",
    # Layout document
    "Doc",
    "Concat",
    "Group",
    "HardLine",
    "Indent",
    "Line",
    "LiteralLine",
    "SoftLine",
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
    "print_doc",
    # Markup tree
    "Node",
    "Fragment",
    "Element",
    "Attribute",
    "AttributeKind",
    "Comment",
    "Doctype",
    "SourceLocation",
    # Parser components
    "Lexer",
    "Parser",
    "Token",
    "TokenType",
    # Tree layout
    "TreePrinter",
    "LeafPrinter",
    "print_leaf",
    # Errors
    "AlineaError",
    "ConfigError",
    "MalformedDocumentError",
    "NodeShapeError",
    "ParseError",
]
