"""Tests for the alinea command-line front end."""

import io
from pathlib import Path

import pytest

from alinea import __version__
from alinea.cli import build_parser, main

UNFORMATTED = '<div id="a" class="b"></div>'
FORMATTED = '<div id="a"\n     class="b"></div>\n'


@pytest.fixture
def page(tmp_path: Path) -> Path:
    path = tmp_path / "page.html"
    path.write_text(UNFORMATTED, encoding="utf-8")
    return path


class TestOutput:
    def test_prints_formatted_file(self, page: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(page)]) == 0
        assert capsys.readouterr().out == FORMATTED
        assert page.read_text(encoding="utf-8") == UNFORMATTED

    def test_reads_stdin(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(UNFORMATTED))
        assert main([]) == 0
        assert capsys.readouterr().out == FORMATTED

    def test_options_reach_config(
        self, page: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["--no-align-attributes", str(page)]) == 0
        assert capsys.readouterr().out == UNFORMATTED + "\n"

    def test_bracket_placement_option(
        self, page: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["--bracket-placement", "hardline", str(page)]) == 0
        assert capsys.readouterr().out == '<div id="a"\n     class="b"\n></div>\n'


class TestCheckAndWrite:
    def test_check_reports_unformatted(
        self, page: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["--check", str(page)]) == 1
        assert f"would reformat {page}" in capsys.readouterr().err

    def test_check_passes_formatted(self, page: Path) -> None:
        page.write_text(FORMATTED, encoding="utf-8")
        assert main(["--check", str(page)]) == 0

    def test_write_rewrites_in_place(
        self, page: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["--write", str(page)]) == 0
        assert page.read_text(encoding="utf-8") == FORMATTED
        assert f"reformatted {page}" in capsys.readouterr().err

    def test_write_skips_formatted(
        self, page: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        page.write_text(FORMATTED, encoding="utf-8")
        assert main(["--write", str(page)]) == 0
        assert capsys.readouterr().err == ""

    def test_check_and_write_exclusive(self, page: Path) -> None:
        with pytest.raises(SystemExit):
            main(["--check", "--write", str(page)])


class TestFailures:
    def test_parse_error_status(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        bad = tmp_path / "bad.html"
        bad.write_text("<p></p></div>", encoding="utf-8")
        assert main([str(bad)]) == 2
        assert "Unexpected closing tag </div>" in capsys.readouterr().err

    def test_missing_file_does_not_stop_others(
        self, page: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main([str(tmp_path / "missing.html"), str(page)]) == 2
        assert capsys.readouterr().out == FORMATTED

    def test_invalid_width(self, page: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--print-width", "0", str(page)]) == 2
        assert "print_width" in capsys.readouterr().err

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out
