"""Tests for the default element layout."""

from alinea import FormatConfig, format_markup

OFF = FormatConfig(align_attributes=False)


def fmt(source: str, config: FormatConfig = OFF) -> str:
    return format_markup(source, config)


class TestElements:
    def test_short_element_stays_flat(self) -> None:
        assert fmt("<p>Hello <b>world</b></p>") == "<p>Hello <b>world</b></p>\n"

    def test_long_children_break(self) -> None:
        source = "<ul><li>" + "a" * 40 + "</li><li>" + "b" * 40 + "</li></ul>"
        assert fmt(source) == (
            "<ul>\n"
            f"  <li>{'a' * 40}</li>\n"
            f"  <li>{'b' * 40}</li>\n"
            "</ul>\n"
        )

    def test_nested_groups_decide_independently(self) -> None:
        source = "<div><p>" + "x" * 70 + "</p><p>short</p></div>"
        out = fmt(source, FormatConfig(align_attributes=False, print_width=80))
        assert out == f"<div>\n  <p>{'x' * 70}</p>\n  <p>short</p>\n</div>\n"

    def test_void_element(self) -> None:
        assert fmt("<br>") == "<br />\n"
        assert fmt('<input type="text">') == '<input type="text" />\n'

    def test_self_closing_attributes_break(self) -> None:
        config = FormatConfig(align_attributes=False, print_width=20)
        assert fmt('<img src="a.png" alt="picture" />', config) == (
            '<img\n  src="a.png"\n  alt="picture"\n/>\n'
        )

    def test_text_whitespace_collapsed(self) -> None:
        assert fmt("<p>\n   a\n\n   b   </p>") == "<p>a b</p>\n"

    def test_top_level_nodes_on_own_lines(self) -> None:
        source = "<!doctype html><html><head></head><body></body></html>"
        assert fmt(source) == "<!doctype html>\n<html><head></head><body></body></html>\n"


class TestRawText:
    def test_script_content_kept_line_by_line(self) -> None:
        source = "<script>\n    if (a < b) {\n      go();\n    }\n</script>"
        assert fmt(source) == "<script>\n  if (a < b) {\n    go();\n  }\n</script>\n"

    def test_empty_script(self) -> None:
        assert fmt('<script src="a.js"></script>') == '<script src="a.js"></script>\n'

    def test_whitespace_only_script(self) -> None:
        assert fmt("<style>\n\n</style>") == "<style></style>\n"

    def test_raw_text_under_aligned_element(self) -> None:
        out = format_markup('<script type="module" defer>\n  run();\n</script>')
        assert out == '<script type="module"\n        defer>\n  run();\n</script>\n'


class TestComments:
    def test_single_line_comment(self) -> None:
        assert fmt("<div><!-- note --></div>") == "<div><!-- note --></div>\n"

    def test_multiline_comment_reindented(self) -> None:
        source = "<div>\n<!--\n      one\n        two\n-->\n</div>"
        assert fmt(source) == "<div>\n  <!--\n        one\n          two\n  -->\n</div>\n"


class TestOutput:
    def test_trailing_newline_optional(self) -> None:
        config = FormatConfig(trailing_newline=False)
        assert format_markup("<p></p>", config) == "<p></p>"

    def test_empty_source(self) -> None:
        assert format_markup("") == ""
        assert format_markup("   \n ") == ""


class TestSiblingSeparators:
    """Separators between siblings follow the source whitespace."""

    def test_top_level_text_stays_attached(self) -> None:
        assert fmt("a<b>x</b>") == "a<b>x</b>\n"

    def test_top_level_spaced_nodes_break(self) -> None:
        assert fmt("a <b>x</b>") == "a\n<b>x</b>\n"

    def test_text_touching_tags_stays_attached_when_broken(self) -> None:
        source = "<p>" + "x" * 80 + "<b>y</b>z</p>"
        assert fmt(source) == "<p>\n  " + "x" * 80 + "<b>y</b>z\n</p>\n"

    def test_touching_tags_may_break(self) -> None:
        source = "<div><p>" + "a" * 40 + "</p><p>" + "b" * 40 + "</p></div>"
        assert fmt(source) == f"<div>\n  <p>{'a' * 40}</p>\n  <p>{'b' * 40}</p>\n</div>\n"

    def test_aligned_children_keep_attached_text(self) -> None:
        out = format_markup('<div id="a" class="b">x<b>y</b>z</div>')
        assert out == '<div id="a"\n     class="b">\n  x<b>y</b>z\n</div>\n'

    def test_spaced_text_in_flat_group(self) -> None:
        assert fmt("<p>a <b>b</b> c</p>") == "<p>a <b>b</b> c</p>\n"
