"""CLI behaviour coverage for the click command group."""

from __future__ import annotations

import json

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner

from lib_log_bridge import __init__conf__
from lib_log_bridge import cli as cli_mod
from lib_log_bridge.lib_log_bridge import summary_info


def test_cli_without_subcommand_prints_summary() -> None:
    result = CliRunner().invoke(cli_mod.cli, [])

    assert result.exit_code == 0
    assert result.output == summary_info()


def test_cli_info_command_matches_summary() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["info"])

    assert result.exit_code == 0
    assert result.output == summary_info()


def test_cli_version_option() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["--version"])

    assert result.exit_code == 0
    assert __init__conf__.version in result.output


def test_cli_traceback_option_updates_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)

    result = CliRunner().invoke(cli_mod.cli, ["--traceback", "info"])

    assert result.exit_code == 0
    assert lib_cli_exit_tools.config.traceback is True


def test_cli_levels_prints_both_tables() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["levels"])

    assert result.exit_code == 0
    assert "java.util.logging -> log4j" in result.output
    assert "log4j -> java.util.logging" in result.output
    assert "FINEST" in result.output
    assert "FATAL" in result.output


@pytest.mark.parametrize(
    "args, expected",
    [
        (["fine"], "DEBUG"),
        (["SEVERE"], "ERROR"),
        (["config"], "DEBUG"),
        (["debug", "--reverse"], "FINER"),
        (["FATAL", "--reverse"], "SEVERE"),
    ],
)
def test_cli_convert_level(args: list[str], expected: str) -> None:
    result = CliRunner().invoke(cli_mod.cli, ["convert-level", *args])

    assert result.exit_code == 0
    assert result.output.strip() == expected


def test_cli_convert_level_rejects_unknown_names() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["convert-level", "verbose"])

    assert result.exit_code == 2
    assert "Unknown log level" in result.output


def test_cli_convert_prints_event_json() -> None:
    result = CliRunner().invoke(
        cli_mod.cli,
        [
            "convert",
            "--logger",
            "app.Foo",
            "--level",
            "SEVERE",
            "--message",
            "boom",
            "--millis",
            "1000",
            "--thread-id",
            "7",
            "--class",
            "app.Foo",
            "--method",
            "run",
        ],
    )

    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert payload["logger_name"] == "app.Foo"
    assert payload["level"] == "ERROR"
    assert payload["message"] == "boom"
    assert payload["timestamp"] == 1000
    assert payload["thread_name"] == "7"
    assert payload["location_info"]["class_name"] == "app.Foo"
    assert payload["location_info"]["method_name"] == "run"
    assert "throwable" not in payload


def test_cli_convert_without_logger_uses_unknown_name() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["convert", "--level", "FINE", "--message", "x", "--millis", "0", "--thread-id", "1"])

    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert payload["logger_name"] == "unknown.jul.logger"
    assert payload["level"] == "DEBUG"


def test_cli_convert_rejects_unknown_level() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["convert", "--level", "LOUD"])

    assert result.exit_code == 2
    assert "Unknown log level" in result.output


def test_main_restores_traceback_preferences(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    recorded: dict[str, bool] = {}

    def fake_run_cli(command, argv=None, *, prog_name=None, **_: object) -> int:  # noqa: ANN001
        result = CliRunner().invoke(command, argv or [])
        if result.exception is not None:
            raise result.exception
        recorded["traceback"] = lib_cli_exit_tools.config.traceback
        recorded["prog_name"] = prog_name == __init__conf__.shell_command
        return result.exit_code

    monkeypatch.setattr(lib_cli_exit_tools, "run_cli", fake_run_cli)

    exit_code = cli_mod.main(["--traceback", "info"])

    assert exit_code == 0
    assert recorded == {"traceback": True, "prog_name": True}
    assert lib_cli_exit_tools.config.traceback is False


@pytest.mark.parametrize("flag, expected", [("--traceback", True), ("--no-traceback", False)])
def test_cli_traceback_flag_sets_force_color_too(monkeypatch: pytest.MonkeyPatch, flag: str, expected: bool) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", not expected, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", not expected, raising=False)

    result = CliRunner().invoke(cli_mod.cli, [flag, "info"])

    assert result.exit_code == 0
    assert lib_cli_exit_tools.config.traceback is expected
    assert lib_cli_exit_tools.config.traceback_force_color is expected


def test_main_restores_force_color_preference(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)

    def fake_run_cli(command, argv=None, *, prog_name=None, **_: object) -> int:  # noqa: ANN001
        return CliRunner().invoke(command, argv or []).exit_code

    monkeypatch.setattr(lib_cli_exit_tools, "run_cli", fake_run_cli)

    assert cli_mod.main(["--traceback", "info"]) == 0
    assert lib_cli_exit_tools.config.traceback_force_color is False
