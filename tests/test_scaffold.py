"""Smoke tests — verify scaffold wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
* Logging is attached to the package logger only.
"""

from __future__ import annotations

import logging

import pytest

from dcl_cli import __version__
from dcl_cli.cli import exit_codes
from dcl_cli.cli.app import main
from dcl_cli.log import LOGGER_NAME, configure_logging
from dcl_cli.exceptions import (
    ApiError,
    BlockchainError,
    ConfigError,
    DclError,
    EnvironmentError,
    InfoError,
    InvalidCoordinatesError,
    LandDataError,
    LandQueryError,
    append_blockchain_suggestion,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            InfoError,
            InvalidCoordinatesError,
            LandDataError,
            LandQueryError,
            ApiError,
            BlockchainError,
            ConfigError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[DclError]
    ) -> None:
        assert issubclass(exc_class, DclError)

    @pytest.mark.parametrize("exc_class", [ApiError, BlockchainError])
    def test_query_errors_share_parent(self, exc_class: type[DclError]) -> None:
        assert issubclass(exc_class, LandQueryError)

    def test_hint_is_stored(self) -> None:
        err = DclError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert DclError("boom").hint is None

    def test_blockchain_suggestion_appended_once(self) -> None:
        hint = append_blockchain_suggestion("Retry later.")
        assert hint.startswith("Retry later.")
        assert "dcl info <target> --blockchain" in hint
        assert append_blockchain_suggestion(hint) == hint


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_no_args_returns_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        """No arguments should print help and exit 0."""
        code = main([])
        assert code == exit_codes.SUCCESS
        assert "info" in capsys.readouterr().out

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_info_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["info", "--help"])
        assert exc_info.value.code == 0
        help_text = capsys.readouterr().out
        assert "--blockchain" in help_text
        assert "$ dcl info -12,40" in help_text

    def test_info_routes_to_handler(
        self, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        from dcl_cli.cli import app as app_module

        seen: list[list[str]] = []

        def fake_handle(args: object, unknown: list[str], argv: list[str]) -> int:
            seen.append(argv)
            return exit_codes.SUCCESS

        monkeypatch.setattr(app_module, "_handle_info", fake_handle)
        code = main(["info", "5"])
        assert code == exit_codes.SUCCESS
        assert seen == [["info", "5"]]


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

class TestLogging:
    def test_warning_level_by_default(self) -> None:
        logger = configure_logging()
        assert logger.name == LOGGER_NAME
        assert logger.level == logging.WARNING
        assert logger.propagate is False

    def test_debug_level(self) -> None:
        assert configure_logging(debug=True).level == logging.DEBUG

    def test_repeated_calls_keep_one_handler(self) -> None:
        configure_logging()
        logger = configure_logging(debug=True)
        assert len(logger.handlers) == 1
