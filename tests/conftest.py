"""Pytest configuration and fixtures."""

from collections.abc import Iterator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from ore.utils import config


@pytest.fixture
def runner() -> CliRunner:
    """Return a CLI runner."""
    return CliRunner()


@pytest.fixture
def app_dir(tmp_path: Path) -> Path:
    """Return a small Electron-like resources directory.

    Layout:
        app/main.js          (35 bytes)
        app/package.json     (17 bytes)
        app/styles/app.css   (20 bytes)
        app/assets/icon.png  (4 bytes)
        app/LICENSE          (3 bytes)
    """
    root = tmp_path / "app"
    (root / "styles").mkdir(parents=True)
    (root / "assets").mkdir()

    (root / "main.js").write_bytes(b"function boot() { return init(); }\n")
    (root / "package.json").write_bytes(b'{"name": "demo"}\n')
    (root / "styles" / "app.css").write_bytes(b"body { margin: 0; }\n")
    (root / "assets" / "icon.png").write_bytes(b"\x89PNG")
    (root / "LICENSE").write_bytes(b"MIT")
    return root


@pytest.fixture
def plugin_source() -> str:
    """Return plugin-style JavaScript exercising all three name patterns."""
    return """
function registerPlugin(app) {
    return app;
}

const loadSettings = async (key) => {
    return key;
};

let toggle = () => true;

class VaultPlugin {
    onload() {
        if (this.ready) {
            this.start();
        }
    }
    async onunload() {
        return null;
    }
}
"""


@pytest.fixture
def config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point the config loader at a temporary (initially missing) file."""
    path = tmp_path / "ore-config.json"
    monkeypatch.setattr(config, "CONFIG_FILE", path)
    config.reload_config()
    yield path
    config.reload_config()
