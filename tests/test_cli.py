"""Tests for the ore command line interface."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from ore import __version__
from ore.cli.main import app
from ore.core.frida import generate_custom_script


@pytest.fixture(autouse=True)
def isolated_config(config_file: Path) -> Path:
    """Keep the user's ~/.ore/config.json out of CLI tests."""
    return config_file


class TestRoot:
    """Tests for the root command."""

    def test_version(self, runner: CliRunner):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"ore {__version__}" in result.stdout

    def test_verbose_flag(self, runner: CliRunner, app_dir: Path):
        result = runner.invoke(app, ["-v", "analyze", "directory", str(app_dir), "--json"])

        assert result.exit_code == 0


class TestAnalyzeDirectoryCommand:
    """Tests for `ore analyze directory`."""

    def test_json_output(self, runner: CliRunner, app_dir: Path):
        result = runner.invoke(app, ["analyze", "directory", str(app_dir), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["total_files"] == 5
        assert data["total_size"] == 79
        assert data["directory"] == str(app_dir)
        assert len(data["assets"]) == 5

    def test_summary_output(self, runner: CliRunner, app_dir: Path):
        result = runner.invoke(app, ["analyze", "directory", str(app_dir)])

        assert result.exit_code == 0
        assert "Analysis Summary" in result.stdout
        assert "Total files:  5" in result.stdout
        assert "Script files: 1" in result.stdout

    def test_type_filter(self, runner: CliRunner, app_dir: Path):
        result = runner.invoke(app, ["analyze", "directory", str(app_dir), "-t", "CSS"])

        assert result.exit_code == 0
        assert "Files (1)" in result.stdout

    def test_empty_directory(self, runner: CliRunner, tmp_path: Path):
        result = runner.invoke(app, ["analyze", "directory", str(tmp_path)])

        assert result.exit_code == 0
        assert "No files found" in result.stdout

    def test_missing_directory(self, runner: CliRunner, tmp_path: Path):
        result = runner.invoke(app, ["analyze", "directory", str(tmp_path / "nope")])

        assert result.exit_code == 1
        assert "does not exist" in result.output

    def test_file_instead_of_directory(self, runner: CliRunner, app_dir: Path):
        result = runner.invoke(app, ["analyze", "directory", str(app_dir / "main.js"), "-j"])

        assert result.exit_code == 1
        assert "{" not in result.stdout


class TestReadCommand:
    """Tests for `ore analyze read`."""

    def test_prints_content(self, runner: CliRunner, app_dir: Path):
        result = runner.invoke(app, ["analyze", "read", str(app_dir / "package.json")])

        assert result.exit_code == 0
        assert '{"name": "demo"}' in result.stdout

    def test_json_output(self, runner: CliRunner, app_dir: Path):
        path = str(app_dir / "main.js")
        result = runner.invoke(app, ["analyze", "read", path, "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {
            "path": path,
            "content": "function boot() { return init(); }\n",
        }

    def test_preview_truncates(self, runner: CliRunner, tmp_path: Path):
        path = tmp_path / "long.js"
        path.write_text("x" * 50)

        result = runner.invoke(app, ["analyze", "read", str(path), "--preview", "10"])

        assert result.exit_code == 0
        assert "Content truncated" in result.stdout
        assert "x" * 11 not in result.stdout

    def test_max_size(self, runner: CliRunner, app_dir: Path):
        result = runner.invoke(
            app, ["analyze", "read", str(app_dir / "main.js"), "--max-size", "4"]
        )

        assert result.exit_code == 1
        assert "File too large: 35 bytes (max: 4 bytes)" in result.output

    def test_configured_max_size(
        self, runner: CliRunner, app_dir: Path, config_file: Path
    ):
        config_file.write_text('{"max_file_size": 8}')

        result = runner.invoke(app, ["analyze", "read", str(app_dir / "main.js")])

        assert result.exit_code == 1
        assert "File too large" in result.output

    def test_option_overrides_config(
        self, runner: CliRunner, app_dir: Path, config_file: Path
    ):
        config_file.write_text('{"max_file_size": 8}')

        result = runner.invoke(
            app, ["analyze", "read", str(app_dir / "main.js"), "-m", "100"]
        )

        assert result.exit_code == 0

    def test_binary_file(self, runner: CliRunner, app_dir: Path):
        result = runner.invoke(app, ["analyze", "read", str(app_dir / "assets" / "icon.png")])

        assert result.exit_code == 1
        assert "Failed to read file" in result.output

    def test_unstatable_path(self, runner: CliRunner):
        result = runner.invoke(app, ["analyze", "read", "a" * 5000])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)


class TestFunctionsCommand:
    """Tests for `ore analyze functions`."""

    def test_json_output(self, runner: CliRunner, tmp_path: Path, plugin_source: str):
        path = tmp_path / "plugin.js"
        path.write_text(plugin_source)

        result = runner.invoke(app, ["analyze", "functions", str(path), "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == [
            "loadSettings",
            "onload",
            "onunload",
            "registerPlugin",
            "toggle",
        ]

    def test_listing(self, runner: CliRunner, app_dir: Path):
        result = runner.invoke(app, ["analyze", "functions", str(app_dir / "main.js")])

        assert result.exit_code == 0
        assert "Detected Functions (1)" in result.stdout
        assert "boot" in result.stdout

    def test_non_script_warns(self, runner: CliRunner, app_dir: Path):
        result = runner.invoke(app, ["analyze", "functions", str(app_dir / "LICENSE")])

        assert result.exit_code == 0
        assert "Not a JavaScript/TypeScript file" in result.stdout
        assert "No functions detected" in result.stdout

    def test_missing_file(self, runner: CliRunner, tmp_path: Path):
        result = runner.invoke(app, ["analyze", "functions", str(tmp_path / "x.js")])

        assert result.exit_code == 1


class TestFridaCommands:
    """Tests for `ore frida`."""

    def test_list_json(self, runner: CliRunner):
        result = runner.invoke(app, ["frida", "list", "--json"])

        assert result.exit_code == 0
        names = [s["name"] for s in json.loads(result.stdout)]
        assert names == [
            "Hook All Functions",
            "Monitor File System Access",
            "Trace Plugin API",
            "Extract API Endpoints",
            "Memory Dump",
        ]

    def test_list_table(self, runner: CliRunner):
        result = runner.invoke(app, ["frida", "list"])

        assert result.exit_code == 0
        assert "Frida Script Templates" in result.stdout

    def test_show(self, runner: CliRunner):
        result = runner.invoke(app, ["frida", "show", "memory dump"])

        assert result.exit_code == 0
        assert "Process.enumerateModules()" in result.stdout

    def test_show_to_file(self, runner: CliRunner, tmp_path: Path):
        output = tmp_path / "scripts" / "api.js"

        result = runner.invoke(
            app, ["frida", "show", "Extract API Endpoints", "-o", str(output)]
        )

        assert result.exit_code == 0
        assert "window.fetch" in output.read_text()

    def test_show_unknown(self, runner: CliRunner):
        result = runner.invoke(app, ["frida", "show", "Keylogger"])

        assert result.exit_code == 1
        assert "No Frida script named" in result.output

    def test_generate(self, runner: CliRunner):
        result = runner.invoke(app, ["frida", "generate", "openVault"])

        assert result.exit_code == 0
        assert "var original_openVault = openVault;" in result.stdout

    def test_generate_sanitizes(self, runner: CliRunner):
        result = runner.invoke(app, ["frida", "generate", "--json", "eval(); alert(1)//"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["name"] == "Custom: evalalert1"
        assert "alert(1)" not in data["script"]

    def test_generate_to_file(self, runner: CliRunner, tmp_path: Path):
        output = tmp_path / "hook.js"

        result = runner.invoke(app, ["frida", "generate", "save", "-o", str(output)])

        assert result.exit_code == 0
        assert output.read_text() == generate_custom_script("save")

    def test_generate_invalid(self, runner: CliRunner):
        result = runner.invoke(app, ["frida", "generate", "();"])

        assert result.exit_code == 1
        assert "Invalid function name" in result.output
