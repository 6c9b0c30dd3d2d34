"""Smoke tests for CLI commands.

Tests that CLI commands parse correctly and don't crash. Uses Click's
CliRunner for testing without actually opening the TUI or touching the
screen.
"""

import json
from unittest.mock import Mock, patch

import pytest
from click.testing import CliRunner

from colorpicker.cli.main import cli
from colorpicker.core import Cancelled, Picked, Unavailable
from colorpicker.models import AppConfig


class StubEyeDropper:
    """Stands in for ScreenEyeDropper; returns a preset result."""

    result = Picked("#ef4444")

    def __init__(self, delay: float = 0.0):
        self.delay = delay

    async def acquire(self):
        return self.result


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def default_config():
    """Keep tests away from the user's real config file."""
    with patch.object(AppConfig, "load_or_default", return_value=AppConfig()) as mock_load:
        yield mock_load


@pytest.mark.integration
class TestCLIHelp:
    """Test that all commands have working help text."""

    def test_main_help(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Color Picker" in result.output
        assert "--color" in result.output

    def test_version_flag(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    @pytest.mark.parametrize("command", ["convert", "random", "pick", "config"])
    def test_command_help(self, runner, command):
        result = runner.invoke(cli, [command, "--help"])
        assert result.exit_code == 0


@pytest.mark.integration
class TestConvertCommand:
    """Test the convert command."""

    def test_convert_hex(self, runner):
        result = runner.invoke(cli, ["convert", "#3b82f6"])
        assert result.exit_code == 0
        assert "#3b82f6" in result.output
        assert "rgb(59, 130, 246)" in result.output
        assert "hsl(217, 91%, 60%)" in result.output
        assert "hsv(217, 76%, 96%)" in result.output

    def test_convert_separate_channels_json(self, runner):
        result = runner.invoke(cli, ["convert", "59", "130", "246", "--json"])
        assert result.exit_code == 0

        payload = json.loads(result.output)
        assert payload["hex"] == "#3b82f6"
        assert payload["hsl"] == {"h": 217, "s": 91, "l": 60}
        assert payload["formatted"]["RGB"] == "rgb(59, 130, 246)"

    def test_convert_rejects_garbage(self, runner):
        result = runner.invoke(cli, ["convert", "not-a-color"])
        assert result.exit_code == 2
        assert "Cannot read" in result.output


@pytest.mark.integration
class TestRandomCommand:
    """Test the random command."""

    def test_seed_is_reproducible(self, runner):
        first = runner.invoke(cli, ["random", "--seed", "42", "--json"])
        second = runner.invoke(cli, ["random", "--seed", "42", "--json"])
        assert first.exit_code == 0
        assert first.output == second.output
        assert json.loads(first.output)["hex"].startswith("#")


@pytest.mark.integration
class TestPickCommand:
    """Test the pick command with the screen replaced by a stub."""

    def test_pick_prints_color(self, runner, default_config):
        StubEyeDropper.result = Picked("#ef4444")
        with patch("colorpicker.cli.commands.pick.ScreenEyeDropper", StubEyeDropper):
            result = runner.invoke(cli, ["pick", "--delay", "0"])
        assert result.exit_code == 0
        assert "rgb(239, 68, 68)" in result.output

    def test_pick_unavailable_exits_with_error(self, runner, default_config):
        StubEyeDropper.result = Unavailable("no display")
        with patch("colorpicker.cli.commands.pick.ScreenEyeDropper", StubEyeDropper):
            result = runner.invoke(cli, ["pick", "--delay", "0"])
        assert result.exit_code == 1
        assert "no display" in result.output

    def test_pick_cancelled_is_not_an_error(self, runner, default_config):
        StubEyeDropper.result = Cancelled()
        with patch("colorpicker.cli.commands.pick.ScreenEyeDropper", StubEyeDropper):
            result = runner.invoke(cli, ["pick", "--delay", "0"])
        assert result.exit_code == 0
        assert "Cancelled" in result.output


@pytest.mark.integration
class TestConfigCommand:
    """Test config show/set/reset against a temporary file."""

    def test_show_defaults(self, runner, temp_dir):
        result = runner.invoke(cli, ["config", "show", "--path", str(temp_dir / "config.json")])
        assert result.exit_code == 0
        assert "initial_color" in result.output
        assert "#3b82f6" in result.output

    def test_set_and_show(self, runner, temp_dir):
        path = temp_dir / "config.json"
        result = runner.invoke(cli, ["config", "set", "initial_color", "#EF4444", "--path", str(path)])
        assert result.exit_code == 0
        assert AppConfig.load_or_default(path).initial_color == "#ef4444"

    def test_set_list_value(self, runner, temp_dir):
        path = temp_dir / "config.json"
        result = runner.invoke(cli, ["config", "set", "history_seed", "#ff0000, #00ff00", "--path", str(path)])
        assert result.exit_code == 0
        assert AppConfig.load_or_default(path).history_seed == ["#ff0000", "#00ff00"]

    def test_set_invalid_value(self, runner, temp_dir):
        path = temp_dir / "config.json"
        result = runner.invoke(cli, ["config", "set", "history_limit", "0", "--path", str(path)])
        assert result.exit_code == 1
        assert "history_limit" in result.output
        assert not path.exists()

    def test_set_unknown_key(self, runner, temp_dir):
        result = runner.invoke(cli, ["config", "set", "volume", "11", "--path", str(temp_dir / "config.json")])
        assert result.exit_code == 2
        assert "Unknown setting" in result.output

    def test_reset(self, runner, temp_dir):
        path = temp_dir / "config.json"
        AppConfig(history_limit=3).save(path)

        result = runner.invoke(cli, ["config", "reset", "--yes", "--path", str(path)])

        assert result.exit_code == 0
        assert AppConfig.load_or_default(path) == AppConfig()

    def test_corrupted_config_reported(self, runner, temp_dir):
        path = temp_dir / "config.json"
        path.write_text("{ not json", encoding="utf-8")

        result = runner.invoke(cli, ["config", "show", "--path", str(path)])

        assert result.exit_code == 1
        assert "invalid syntax" in result.output


@pytest.mark.integration
class TestLaunchTUI:
    """Test the default command without starting Textual."""

    def test_launches_app_with_start_color(self, runner, temp_dir, default_config):
        with patch("colorpicker.tui.ColorPickerApp") as mock_app:
            result = runner.invoke(cli, ["--color", "#EF4444", "--log-file", str(temp_dir / "test.log")])

        assert result.exit_code == 0
        controller = mock_app.call_args.args[0]
        assert controller.color.hex == "#ef4444"
        mock_app.return_value.run.assert_called_once_with()

    def test_invalid_start_color(self, runner):
        result = runner.invoke(cli, ["--color", "blue"])
        assert result.exit_code == 2

    def test_startup_error_is_reported(self, runner, temp_dir, default_config):
        with patch("colorpicker.tui.ColorPickerApp", Mock(side_effect=RuntimeError("terminal too small"))):
            result = runner.invoke(cli, ["--log-file", str(temp_dir / "test.log")])

        assert result.exit_code == 1
        assert "terminal too small" in result.output
