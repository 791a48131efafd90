"""Tests for the command line interface."""

import json
import os

import pytest
from typer.testing import CliRunner

from responsive_size.cli.app import create_app, parse_value_args
from responsive_size.config import CONFIG_ENV_VAR
from responsive_size.core.errors import BreakpointConfigError

runner = CliRunner()


@pytest.fixture
def app():
    return create_app()


class TestClassify:
    """Tests for the classify command."""

    def test_width(self, app) -> None:
        result = runner.invoke(app, ["classify", "1000"])
        assert result.exit_code == 0
        assert "large" in result.output
        assert ">= 950" in result.output

    def test_catch_all(self, app) -> None:
        result = runner.invoke(app, ["classify", "50"])
        assert result.exit_code == 0
        assert "extraSmall" in result.output
        assert "below every threshold" in result.output

    def test_shortest_side(self, app) -> None:
        result = runner.invoke(app, ["classify", "1000", "--height", "500", "--shortest-side"])
        assert result.exit_code == 0
        assert "small" in result.output

    def test_json(self, app) -> None:
        result = runner.invoke(app, ["classify", "600", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data == {"dimension": 600.0, "category": "medium", "threshold": 600.0, "kind": "standard"}

    def test_granular(self, app) -> None:
        result = runner.invoke(app, ["classify", "390", "--granular", "--json"])
        assert json.loads(result.output)["category"] == "compactNormal"

    def test_config_file(self, app, write_config) -> None:
        path = write_config({"breakpoints": {"medium": 800}})
        result = runner.invoke(app, ["classify", "700", "--config", str(path), "--json"])
        assert json.loads(result.output)["category"] == "small"

    def test_config_from_env(self, app, write_config, monkeypatch: pytest.MonkeyPatch) -> None:
        path = write_config({"breakpoints": {"medium": 800}})
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        result = runner.invoke(app, ["classify", "700", "--json"])
        assert json.loads(result.output)["category"] == "small"

    def test_granular_conflicts_with_env_config(
        self, app, write_config, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        path = write_config({"breakpoints": {"medium": 800}})
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        result = runner.invoke(app, ["classify", "390", "--granular", "--json"])
        assert result.exit_code == 1
        assert "--granular conflicts" in result.output

    def test_granular_with_granular_config(self, app, write_config) -> None:
        path = write_config({"kind": "granular"})
        result = runner.invoke(app, ["classify", "390", "--granular", "-c", str(path), "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output)["kind"] == "granular"

    def test_config_shortest_side(self, app, write_config) -> None:
        path = write_config({"useShortestSide": True})
        result = runner.invoke(app, ["classify", "1000", "--height", "500", "-c", str(path), "-j"])
        assert json.loads(result.output)["category"] == "small"

    def test_bad_config(self, app, write_config) -> None:
        path = write_config({"breakpoints": {"large": 5000}})
        result = runner.invoke(app, ["classify", "700", "--config", str(path)])
        assert result.exit_code == 1
        assert "descending" in result.output

    def test_negative_width_rejected(self, app) -> None:
        result = runner.invoke(app, ["classify", "--", "-5"])
        assert result.exit_code != 0


class TestTable:
    """Tests for the table command."""

    def test_standard(self, app) -> None:
        result = runner.invoke(app, ["table"])
        assert result.exit_code == 0
        assert "extraLarge" in result.output
        assert "1200" in result.output
        assert "(catch-all)" in result.output

    def test_granular(self, app) -> None:
        result = runner.invoke(app, ["table", "--granular"])
        assert result.exit_code == 0
        assert "jumboExtraLarge" in result.output
        assert "tiny" in result.output

    def test_shows_values(self, app, write_config) -> None:
        path = write_config({"values": {"small": "mobile"}})
        result = runner.invoke(app, ["table", "--config", str(path)])
        assert "mobile" in result.output


class TestResolve:
    """Tests for the resolve command."""

    def test_fallback(self, app) -> None:
        result = runner.invoke(app, ["resolve", "700", "-v", "small=mobile", "-v", "large=desktop"])
        assert result.exit_code == 0
        assert result.output.strip() == "mobile"

    def test_direct(self, app) -> None:
        result = runner.invoke(app, ["resolve", "1000", "-v", "small=mobile", "-v", "large=desktop"])
        assert result.output.strip() == "desktop"

    def test_shortest_side(self, app) -> None:
        result = runner.invoke(
            app,
            ["resolve", "1000", "--height", "300", "--shortest-side", "-v", "small=s", "-v", "large=l"],
        )
        assert result.output.strip() == "s"

    def test_values_from_config(self, app, write_config) -> None:
        path = write_config({"values": {"small": "mobile", "large": "desktop"}})
        result = runner.invoke(app, ["resolve", "1000", "--config", str(path)])
        assert result.output.strip() == "desktop"

    def test_option_overrides_config(self, app, write_config) -> None:
        path = write_config({"values": {"small": "mobile", "large": "desktop"}})
        result = runner.invoke(app, ["resolve", "1000", "--config", str(path), "-v", "LARGE=wide"])
        assert result.exit_code == 0
        assert result.output.strip() == "wide"

    def test_granular(self, app) -> None:
        result = runner.invoke(app, ["resolve", "800", "--granular", "-v", "compactSmall=phone"])
        assert result.output.strip() == "phone"

    def test_no_values(self, app) -> None:
        result = runner.invoke(app, ["resolve", "700"])
        assert result.exit_code == 1
        assert "at least one" in result.output

    def test_bad_value_arg(self, app) -> None:
        result = runner.invoke(app, ["resolve", "700", "-v", "mobile"])
        assert result.exit_code == 1
        assert "CATEGORY=VALUE" in result.output

    def test_unknown_category(self, app) -> None:
        result = runner.invoke(app, ["resolve", "700", "-v", "huge=x"])
        assert result.exit_code == 1
        assert "huge" in result.output

    def test_verbose(self, app) -> None:
        result = runner.invoke(app, ["--verbose", "resolve", "700", "-v", "small=mobile"])
        assert result.exit_code == 0
        assert "mobile" in result.output


class TestTerminal:
    """Tests for the terminal command."""

    @pytest.fixture(autouse=True)
    def wide_terminal(self, monkeypatch: pytest.MonkeyPatch) -> None:
        # rich also asks for the size, passing a file descriptor
        monkeypatch.setattr(os, "get_terminal_size", lambda *args: os.terminal_size((132, 40)))

    def test_category(self, app) -> None:
        result = runner.invoke(app, ["terminal"])
        assert result.exit_code == 0
        assert "132x40" in result.output
        assert "extraSmall" in result.output

    def test_custom_table(self, app, write_config) -> None:
        path = write_config({
            "breakpoints": {"extraLarge": 160, "large": 120, "medium": 80, "small": 40},
            "values": {"medium": "single", "large": "split"},
        })
        result = runner.invoke(app, ["terminal", "--config", str(path)])
        assert result.exit_code == 0
        assert "large" in result.output
        assert "split" in result.output


class TestParseValueArgs:
    def test_parses_pairs(self) -> None:
        assert parse_value_args(["small=a", " large =b=c"]) == {"small": "a", "large": "b=c"}

    def test_empty_value_allowed(self) -> None:
        assert parse_value_args(["small="]) == {"small": ""}

    def test_missing_separator(self) -> None:
        with pytest.raises(BreakpointConfigError):
            parse_value_args(["small"])
