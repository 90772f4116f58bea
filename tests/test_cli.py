"""Tests for the xcbuild-parser command line entry point."""

import io
import json
from unittest.mock import patch

from conftest import FIXTURES_DIR
from xcbuild_parser import cli
from xcbuild_parser.config import Settings, settings
from xcbuild_parser.exceptions import ReportSerializationError


class TestMain:
    def test_reads_stdin(self, monkeypatch, capsys):
        log = (FIXTURES_DIR / "xctest-fail.txt").read_text(encoding="utf-8")
        monkeypatch.setattr("sys.stdin", io.StringIO(log))

        exit_code = cli.main([])

        assert exit_code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["status"] == "failure"
        assert data["summary"]["failedTests"] == 1
        assert "warnings" not in data

    def test_invalid_utf8_on_stdin_still_reports(self, monkeypatch, capsys):
        raw = b"ok\n\xff\xfe garbage\n/a.swift:1:1: error: bad \xff byte\n** BUILD FAILED **\n"
        monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(raw), encoding="ascii"))

        exit_code = cli.main([])

        assert exit_code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["status"] == "failure"
        assert data["summary"]["errors"] == 2
        assert data["errors"][0]["message"] == "bad \ufffd byte"

    def test_print_warnings_flag(self, capsys):
        exit_code = cli.main(["--print-warnings", str(FIXTURES_DIR / "build-warnings.txt")])

        assert exit_code == 0
        data = json.loads(capsys.readouterr().out)
        assert len(data["warnings"]) == 2

    def test_failed_build_still_exits_zero(self, capsys):
        exit_code = cli.main([str(FIXTURES_DIR / "build-failure-errors.txt")])

        assert exit_code == 0
        assert json.loads(capsys.readouterr().out)["status"] == "failure"

    def test_missing_input_file(self, tmp_path, capsys):
        exit_code = cli.main([str(tmp_path / "missing.log")])

        captured = capsys.readouterr()
        assert exit_code == 1
        assert captured.out == ""
        assert "Cannot read" in captured.err

    def test_serialization_failure_is_fatal(self, capsys):
        error = ReportSerializationError("Failed to encode build summary - boom")
        with patch("xcbuild_parser.cli.serialize_report", side_effect=error):
            exit_code = cli.main([str(FIXTURES_DIR / "build-success.txt")])

        captured = capsys.readouterr()
        assert exit_code == 1
        assert captured.out == ""
        assert "Failed to encode build summary" in captured.err

    def test_print_warnings_default_from_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "PRINT_WARNINGS", True)

        args = cli.build_arg_parser().parse_args([])

        assert args.print_warnings is True


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("XCBUILD_PARSER_PRINT_WARNINGS", raising=False)
        fresh = Settings(_env_file=None)

        assert fresh.PRINT_WARNINGS is False
        assert fresh.JSON_INDENT == 2
        assert fresh.SWIFT_TESTING_SUITE == "Swift Testing"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("XCBUILD_PARSER_PRINT_WARNINGS", "true")
        monkeypatch.setenv("XCBUILD_PARSER_SWIFT_TESTING_SUITE", "Unnamed")

        fresh = Settings(_env_file=None)

        assert fresh.PRINT_WARNINGS is True
        assert fresh.SWIFT_TESTING_SUITE == "Unnamed"
