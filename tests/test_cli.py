"""Tests for the smb-mkdirp command line interface."""

from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from smb_mkdirp.cli import cli


@pytest.fixture
def runner(mock_storage_env: Path) -> CliRunner:
    return CliRunner()


def test_decompose_prints_ancestors(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["decompose", "/a/b\\c"])

    assert result.exit_code == 0
    assert result.output.splitlines() == ["a", "a\\b", "a\\b\\c"]


def test_decompose_invalid_path(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["decompose", "//"])

    assert result.exit_code == 2
    assert "Invalid path" in result.output


def test_backoff_default_schedule(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["backoff"])

    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "retry 1: 100ms",
        "retry 2: 200ms",
        "retry 3: 400ms",
        "retry 4: 800ms",
        "retry 5: 1000ms",
    ]


def test_backoff_uses_config_file(runner: CliRunner, mock_storage_env: Path) -> None:
    config_path = mock_storage_env / "custom.yaml"
    config_path.write_text("max_retries: 2\nbase_delay_ms: 250\n")

    result = runner.invoke(cli, ["--config", str(config_path), "backoff"])

    assert result.exit_code == 0
    assert result.output.splitlines() == ["retry 1: 250ms", "retry 2: 500ms"]


def test_backoff_disabled(runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SMB_MKDIRP_MAX_RETRIES", "0")

    result = runner.invoke(cli, ["backoff"])

    assert result.output.strip() == "Retries disabled"


def test_config_shows_effective_settings(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["config"])

    assert result.exit_code == 0
    data = yaml.safe_load(result.output)
    assert data["max_retries"] == 5
    assert data["default_mode"] == "0o777"


def test_read_only_commands_leave_no_files(runner: CliRunner, mock_storage_env: Path) -> None:
    """Given an empty working directory and home
    When running decompose, backoff and config
    Then nothing should be written to disk
    """
    for args in (["decompose", "a/b"], ["backoff"], ["config"]):
        assert runner.invoke(cli, args).exit_code == 0

    assert list(mock_storage_env.iterdir()) == []


def test_config_init_writes_default_file(runner: CliRunner, mock_storage_env: Path) -> None:
    result = runner.invoke(cli, ["config", "--init"])

    config_path = mock_storage_env.resolve() / "config" / "mkdirp.yaml"
    assert result.exit_code == 0
    assert config_path.is_file()
    assert str(config_path) in result.output
    assert yaml.safe_load(result.output)["max_retries"] == 5


def test_config_init_respects_config_option(runner: CliRunner, mock_storage_env: Path) -> None:
    target = mock_storage_env / "custom" / "mkdirp.yaml"

    result = runner.invoke(cli, ["--config", str(target), "config", "--init"])

    assert result.exit_code == 0
    assert target.is_file()
