"""Tests for Alinea utility modules."""

import logging

import pytest


class TestCollapseWhitespace:
    """Tests for collapse_whitespace function."""

    def test_runs_collapsed(self) -> None:
        from alinea.utils.text import collapse_whitespace

        assert collapse_whitespace("a\n\n   b\tc") == "a b c"

    def test_ends_stripped(self) -> None:
        from alinea.utils.text import collapse_whitespace

        assert collapse_whitespace("  Hello \n  World ") == "Hello World"

    def test_whitespace_only(self) -> None:
        from alinea.utils.text import collapse_whitespace

        assert collapse_whitespace(" \r\n\t ") == ""
        assert collapse_whitespace("") == ""


class TestVerbatimLines:
    """Tests for verbatim_lines function."""

    def test_dedent_and_blank_edges(self) -> None:
        from alinea.utils.text import verbatim_lines

        assert verbatim_lines("\n    a\n      b\n") == ["a", "  b"]

    def test_inner_blank_lines_kept(self) -> None:
        from alinea.utils.text import verbatim_lines

        assert verbatim_lines("a\n\n\nb") == ["a", "", "", "b"]

    def test_trailing_whitespace_stripped(self) -> None:
        from alinea.utils.text import verbatim_lines

        assert verbatim_lines("a   \nb\t") == ["a", "b"]

    @pytest.mark.parametrize("newline", ["\r\n", "\r"])
    def test_line_endings_normalized(self, newline: str) -> None:
        from alinea.utils.text import verbatim_lines

        assert verbatim_lines(f"a{newline}b") == ["a", "b"]

    def test_blank_content(self) -> None:
        from alinea.utils.text import verbatim_lines

        assert verbatim_lines("\n   \n") == []


class TestLogger:
    """Tests for logger module."""

    def test_get_logger(self) -> None:
        from alinea.utils.logger import get_logger

        logger = get_logger("mymodule")
        assert logger.name == "alinea.mymodule"

    def test_logger_with_alinea_prefix(self) -> None:
        from alinea.utils.logger import get_logger

        logger = get_logger("alinea.parser")
        assert logger.name == "alinea.parser"

    def test_logger_name_starting_with_alinea_not_submodule(self) -> None:
        """Names starting with 'alinea' but not submodules should get prefix."""
        from alinea.utils.logger import get_logger

        logger = get_logger("alinea_other")
        assert logger.name == "alinea.alinea_other"

    def test_logger_exact_alinea_name(self) -> None:
        """The exact name 'alinea' should not get double-prefixed."""
        from alinea.utils.logger import get_logger

        logger = get_logger("alinea")
        assert logger.name == "alinea"

    def test_implicit_close_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        from alinea import parse

        with caplog.at_level(logging.DEBUG, logger="alinea"):
            parse("<div><p>x</div>")
        assert any("implicitly closes 1 element" in r.getMessage() for r in caplog.records)

    def test_aligned_layout_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        from alinea import format_markup

        with caplog.at_level(logging.DEBUG, logger="alinea"):
            format_markup('<a b="1" c="2"></a>')
        assert any("Aligning 2 attributes of <a>" in r.getMessage() for r in caplog.records)
