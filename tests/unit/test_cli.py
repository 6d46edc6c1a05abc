"""Tests for the yext-errors command line tool."""

import io
import json
from unittest.mock import patch

import pytest
from rich.console import Console

from yext.cli.display import FriendlyDisplay, JsonDisplay, TableDisplay, create_display
from yext.cli.main import _real_main, build_parser, main
from yext.cli.util import CANCELLED_EXIT, graceful_main
from yext.codec import errors_from_string

ENCODED = (
    "type: FATAL_ERROR code: 2000 message: Entity not found; "
    "type: WARNING code: 3001 message: Field is deprecated; "
    "request uuid: 7199948d-9f0d-4649-9625-495b33ad4940"
)


@pytest.mark.unit
class TestDisplays:
    def test_factory(self):
        assert isinstance(create_display("json"), JsonDisplay)
        assert isinstance(create_display("friendly"), FriendlyDisplay)
        assert isinstance(create_display("table"), TableDisplay)
        assert isinstance(create_display("unknown"), TableDisplay)

    def test_table_renders_rows_and_summary(self):
        out = io.StringIO()
        TableDisplay(console=Console(file=out, width=200)).show(errors_from_string(ENCODED))
        text = out.getvalue()
        assert "Entity not found" in text
        assert "3001" in text
        assert "1 error(s), 1 warning(s)" in text
        assert "not found" in text

    def test_table_empty(self):
        out = io.StringIO()
        TableDisplay(console=Console(file=out, width=200)).show(errors_from_string(""))
        assert "No errors" in out.getvalue()


@pytest.mark.unit
class TestDecodeCommand:
    def test_json_format(self, capsys):
        assert _real_main(["decode", "--format", "json", ENCODED]) == 0
        records = json.loads(capsys.readouterr().out)
        assert [r["code"] for r in records] == [2000, 3001]
        assert records[0]["request_uuid"] == "7199948d-9f0d-4649-9625-495b33ad4940"

    def test_friendly_format(self, capsys):
        assert _real_main(["decode", "-f", "friendly", ENCODED]) == 0
        assert capsys.readouterr().out.strip() == "Entity not found, Field is deprecated"

    def test_reads_stdin(self, capsys):
        with patch("sys.stdin", io.StringIO(ENCODED + "\n\n")):
            assert _real_main(["decode", "--format", "json"]) == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 1

    def test_bad_input_exits_1_and_continues(self, capsys):
        bad = "type: FATAL_ERROR code: x message: y; request uuid: 9"
        assert _real_main(["decode", "--format", "json", bad, ENCODED]) == 1
        captured = capsys.readouterr()
        assert "Could not decode" in captured.err
        assert len(captured.out.strip().splitlines()) == 1

    def test_format_from_environment(self, monkeypatch):
        monkeypatch.setenv("YEXT_ERRORS_FORMAT", "json")
        args = build_parser().parse_args(["decode", ENCODED])
        assert args.format == "json"

    def test_invalid_environment_format_falls_back(self, monkeypatch):
        monkeypatch.setenv("YEXT_ERRORS_FORMAT", "yaml")
        args = build_parser().parse_args(["decode", ENCODED])
        assert args.format == "table"

    def test_no_command_prints_help(self, capsys):
        assert _real_main([]) == 0
        assert "yext-errors" in capsys.readouterr().out


@pytest.mark.unit
class TestEntryPoint:
    def test_main_exits_with_code(self):
        with patch("sys.argv", ["yext-errors", "decode", "-f", "friendly", ENCODED]):
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code == 0

    def test_graceful_main_handles_interrupt(self, capsys):
        def interrupted(argv):
            raise KeyboardInterrupt()

        assert graceful_main(interrupted, []) == CANCELLED_EXIT
        assert "Cancelled" in capsys.readouterr().err

    def test_graceful_main_passes_exit_code_through(self):
        assert graceful_main(lambda argv: 3, []) == 3
        assert graceful_main(lambda argv: None, []) == 0
