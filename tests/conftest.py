from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

# Ensure tests always import the local src tree, not an older installed wheel.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from xcrun.core.sdks import SdkDescriptor  # noqa: E402


def sdk_descriptor(name: str, path: Path | str, **overrides: str) -> SdkDescriptor:
    fields = {
        "name": name,
        "path": str(path),
        "version": "14.0",
        "target_triple": "x86_64-apple-darwin",
        "macosx_deployment_target": "10.13",
        "ios_deployment_target": "12.0",
    }
    fields.update(overrides)
    return SdkDescriptor(**fields)


def config_toml(sdks: list[SdkDescriptor]) -> str:
    """Render descriptors as `[[sdk]]` tables (JSON strings are valid TOML strings)."""
    if not sdks:
        return "sdk = []\n"
    blocks = []
    for sdk in sdks:
        lines = ["[[sdk]]"]
        for key, value in vars(sdk).items():
            lines.append(f"{key} = {json.dumps(value)}")
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks) + "\n"


@pytest.fixture
def make_tool():
    """Create an executable shell script at `<root>/<subdir>/<name>`."""

    def _make(root: Path, subdir: str, name: str, body: str = "exit 0") -> Path:
        path = root / subdir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"#!/bin/sh\n{body}\n")
        path.chmod(0o755)
        return path

    return _make


@pytest.fixture
def xdg_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Point XDG_CONFIG_HOME at a temp dir and return a config writer."""
    config_home = tmp_path / "config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))

    def _write(sdks: list[SdkDescriptor]) -> Path:
        path = config_home / "xcrun" / "config.toml"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(config_toml(sdks))
        return path

    return _write
